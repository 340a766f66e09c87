"""
Pattern and code schemas - Pydantic models for pattern metadata and firmware export
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class PatternResponse(BaseModel):
    """Pattern definition"""
    id: str = Field(description="Pattern id (e.g. 'rainbow')")
    deterministic: bool = Field(description="False for patterns using randomness (fire, sparkle)")
    routine: str = Field(description="Firmware routine name (e.g. 'rainbowPattern')")
    snippet: str = Field(description="FastLED snippet used in the generated sketch")

    class Config:
        json_schema_extra = {
            "example": {
                "id": "strobe",
                "deterministic": True,
                "routine": "strobePattern",
                "snippet": "bool strobeOn = (frame / 2) % 2 == 0;\n  ..."
            }
        }


class PatternListResponse(BaseModel):
    """List of all patterns"""
    patterns: List[PatternResponse]
    count: int = Field(description="Total number of patterns")


class CodeRequest(BaseModel):
    """
    Firmware export request

    Omitted fields are taken from the current session.
    """
    pattern: Optional[str] = None
    led_count: Optional[int] = None
    brightness: Optional[int] = None
    speed: Optional[int] = None

    class Config:
        json_schema_extra = {
            "example": {"pattern": "fire", "led_count": 60}
        }


class CodeResponse(BaseModel):
    """Generated firmware source"""
    pattern: str
    code: str = Field(description="Arduino/FastLED sketch source")
