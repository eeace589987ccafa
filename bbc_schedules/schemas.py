from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class ScheduleRequest(BaseModel):
    """Validated parameters for one at-a-glance schedule page"""
    model_config = ConfigDict(frozen=True)

    channel: str = Field(..., description="Channel code (e.g., 'radio1', '6music')")
    location: str | None = Field(None, description="Region code, Radio 1 only (e.g., 'england')")
    frequency: str | None = Field(None, description="Band code, Radio 4 only ('fm' or 'lw')")
    year: int = Field(..., description="Schedule year (e.g., 2011)")
    month: int = Field(..., ge=1, le=12, description="Schedule month, not zero padded")
    day: int = Field(..., ge=1, le=31, description="Schedule day of month, not zero padded")

    @property
    def schedule_date(self) -> date:
        return date(self.year, self.month, self.day)


class ProgrammeResponse(BaseModel):
    """Single programme entry"""
    start_time: str = Field(..., description="Start time as shown on the page (HH:MM)")
    end_time: str = Field(..., description="End time as shown on the page (HH:MM)")
    title: str = Field(..., description="Programme title, HTML entities decoded")
    url: str = Field(..., description="Absolute URL of the programme page")


class ListingsResponse(BaseModel):
    """Schedule listings for one channel and day"""
    channel: str
    channel_name: str
    location: str | None = None
    frequency: str | None = None
    date: str = Field(..., description="Schedule date (YYYY-MM-DD)")
    source_url: str = Field(..., description="At-a-glance page the listings were scanned from")
    programmes_count: int
    programmes: list[ProgrammeResponse]
