from pydantic import BaseModel
from typing import List, Union

class MessageResponse(BaseModel):
    message: str

class FieldErrorDetail(BaseModel):
    path: List[Union[str, int]]
    message: str

class ValidationErrorResponse(BaseModel):
    error: List[FieldErrorDetail]
