"""
Insert validation used when LOCALVEC_SCHEMA_VALIDATION_STRICT is enabled.
"""

import math
from typing import List, Optional

import numpy as np
from pydantic import BaseModel, field_validator


class InsertRequest(BaseModel):
    text: str
    embedding: List[float]
    metadata: Optional[str] = None

    @field_validator('embedding', mode='before')
    @classmethod
    def embedding_to_list(cls, v):
        if isinstance(v, np.ndarray):
            return v.reshape(-1).tolist()
        return v

    @field_validator('embedding')
    @classmethod
    def embedding_must_be_finite(cls, v):
        if not all(math.isfinite(x) for x in v):
            raise ValueError('embedding values must be finite')
        return v
