"""
Session schemas - Pydantic models for preview session requests/responses
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from models.color import Color
from services.preview_session_service import SessionSnapshot


class LEDResponse(BaseModel):
    """One LED color"""
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    hex: str = Field(description="CSS hex string, e.g. '#ff0000'")

    @classmethod
    def from_color(cls, color: Color) -> "LEDResponse":
        return cls(r=color.r, g=color.g, b=color.b, hex=color.to_hex())


class SessionResponse(BaseModel):
    """Current preview session state"""
    pattern: str = Field(description="Pattern id (e.g. 'rainbow')")
    led_count: int
    brightness: int
    speed: int
    frame: int = Field(description="Current frame counter")
    state: str = Field(description="Clock state: IDLE or RUNNING")
    interval_ms: int = Field(description="Current tick interval in milliseconds")
    leds: List[LEDResponse]
    has_code: bool = Field(description="Whether firmware code has been generated")

    @classmethod
    def from_snapshot(cls, snapshot: SessionSnapshot, interval_ms: int) -> "SessionResponse":
        return cls(
            pattern=snapshot.pattern,
            led_count=snapshot.config.led_count,
            brightness=snapshot.config.brightness,
            speed=snapshot.config.speed,
            frame=snapshot.frame,
            state=snapshot.state.name,
            interval_ms=interval_ms,
            leds=[LEDResponse.from_color(c) for c in snapshot.leds],
            has_code=snapshot.generated_code is not None,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "pattern": "police",
                "led_count": 4,
                "brightness": 100,
                "speed": 50,
                "frame": 0,
                "state": "IDLE",
                "interval_ms": 50,
                "leds": [
                    {"r": 255, "g": 0, "b": 0, "hex": "#ff0000"},
                    {"r": 255, "g": 0, "b": 0, "hex": "#ff0000"},
                    {"r": 0, "g": 0, "b": 0, "hex": "#000000"},
                    {"r": 0, "g": 0, "b": 0, "hex": "#000000"},
                ],
                "has_code": False,
            }
        }


class SessionConfigUpdateRequest(BaseModel):
    """Partial update of strip config; omitted fields are unchanged"""
    led_count: Optional[int] = Field(None, description="LED count (clamped to >= 1)")
    brightness: Optional[int] = Field(None, description="Brightness percent (clamped to 10-100)")
    speed: Optional[int] = Field(None, description="Speed percent (clamped to 0-100)")

    class Config:
        json_schema_extra = {
            "example": {"led_count": 30, "speed": 80}
        }


class PatternUpdateRequest(BaseModel):
    """Select a pattern (unknown ids render solid white)"""
    pattern: str = Field(description="Pattern id, e.g. 'rainbow'")


class PromptRequest(BaseModel):
    """Free-text effect description"""
    prompt: str = Field(min_length=1, description="E.g. 'Create a calm ocean wave effect'")


class PromptResponse(BaseModel):
    pattern: str = Field(description="Pattern picked from the prompt")
    session: SessionResponse
