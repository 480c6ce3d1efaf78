"""Frontend configuration endpoint."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from dashboard_proxy.config import Settings, get_settings

router = APIRouter()


class FrontendConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    open_weather_api_key: str = Field(alias="openWeatherApiKey")


@router.get("/config", response_model=FrontendConfig)
async def get_config(settings: Settings = Depends(get_settings)):
    return FrontendConfig(open_weather_api_key=settings.openweather_api_key)
