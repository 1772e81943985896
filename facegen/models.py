"""
Pydantic models for request/response validation.

These models define the JSON contract of the facegen service.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .generator import AvatarFeatures


class AvatarFeaturesModel(BaseModel):
    """
    Feature set of one avatar, serialized with camelCase keys.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    skin_color: str = Field(..., description="Skin colour as hsl(H, 50%, 70%)")
    eye_type: int = Field(..., ge=0, lt=4, description="Eye style index")
    mouth_type: int = Field(..., ge=0, lt=4, description="Mouth style index")
    nose_type: int = Field(..., ge=0, lt=3, description="Nose style index")
    hair_type: int = Field(..., ge=0, lt=5, description="Hair style index")
    hair_color: str = Field(..., description="Hair colour as hsl(H, 60%, 50%)")
    accessory_type: int = Field(..., ge=0, lt=4, description="Accessory index")

    @classmethod
    def from_features(cls, features: AvatarFeatures) -> "AvatarFeaturesModel":
        return cls(**features.to_dict())


class AvatarInfoResponse(BaseModel):
    """Response of the /avatar/{identifier}/info endpoint."""
    identifier: str = Field(..., description="Identifier exactly as requested")
    digest: str = Field(..., description="SHA-256 hex digest the features were sliced from")
    features: AvatarFeaturesModel


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status: ok or error")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    environment: str = Field(..., description="Deployment label")


class ErrorResponse(BaseModel):
    """Standard error envelope."""
    model_config = ConfigDict(populate_by_name=True)

    error: str = Field(..., description="Short error title")
    message: str = Field(..., description="Human readable explanation")
    status_code: Optional[int] = Field(None, alias="statusCode", description="HTTP status code")
