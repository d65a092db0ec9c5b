from __future__ import annotations

from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from .easing import bezier


Progress = Annotated[float, Field(ge=0.0, le=1.0)]


class Ease(BaseModel):
    type: Literal["linear", "cubic-bezier"] = "linear"
    p: Optional[list[float]] = Field(default=None, description="Bezier control points [x1,y1,x2,y2]")

    @model_validator(mode="after")
    def validate_bezier(self):
        if self.type == "cubic-bezier":
            if not self.p or len(self.p) != 4:
                raise ValueError("cubic-bezier requires p=[x1,y1,x2,y2]")
            # Raises InvalidControlPoint (a ValueError) for x outside [0, 1]
            bezier(*self.p)
        return self


class EaseRequest(BaseModel):
    ease: Ease
    x: List[Progress] = Field(..., min_length=1, description="Progress values in [0,1]")


class EaseResponse(BaseModel):
    y: List[float]


class EaseSample(BaseModel):
    x: List[float]
    y: List[float]
