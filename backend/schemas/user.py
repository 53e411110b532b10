from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

# Shared properties for user models
class UserBase(BaseModel):
    username: str = Field(min_length=1)

# Schema for login credentials
class UserLogin(UserBase):
    password: str = Field(min_length=1)

# Schema for creating an account
class UserCreate(UserBase):
    password: str = Field(min_length=1)
    role: str = Field(min_length=1)

# Schema for updating an account; a missing or empty password keeps the stored one
class UserUpdate(BaseModel):
    role: str = Field(min_length=1)
    password: Optional[str] = None

# Output schema, the password never leaves the server
class UserResponse(UserBase):
    id: int
    role: str

    model_config = ConfigDict(from_attributes=True)
