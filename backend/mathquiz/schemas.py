"""Request bodies accepted by the game API.

Models forbid unknown fields and use strict types, so ``"2"`` is not a
difficulty and ``true`` is not an answer.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class StartGameRequest(BaseModel):
    model_config = ConfigDict(extra='forbid', str_strip_whitespace=True)

    name: StrictStr = Field(..., min_length=1, max_length=128, description="Player name")
    difficulty: StrictInt = Field(..., ge=1, le=4, description="Difficulty level 1-4")


class SubmitAnswerRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    answer: float = Field(..., strict=True, allow_inf_nan=False, description="Numeric answer")
