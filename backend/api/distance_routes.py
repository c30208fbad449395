# api/distance_routes.py
from typing import List, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from adapters.online.google_distance_adapter import GoogleDistanceClient
from config import Settings, get_settings
from core.exceptions import ConfigurationError, DistanceMatrixRequestError

router = APIRouter(prefix="/distance", tags=["distance"])


class DrivingDistanceBody(BaseModel):
    origin: str
    destinations: Union[str, List[str]]


def get_distance_client(
    settings: Settings = Depends(get_settings),
) -> GoogleDistanceClient:
    try:
        return GoogleDistanceClient(
            api_key=settings.GOOGLE_API_KEY, batch_size=settings.DISTANCE_BATCH_SIZE
        )
    except ConfigurationError as e:
        raise HTTPException(
            503, detail={"status": "error", "message": str(e)}
        ) from e


@router.post("/driving", summary="Driving distances from one origin")
def driving_distances(
    body: DrivingDistanceBody,
    client: GoogleDistanceClient = Depends(get_distance_client),
):
    try:
        data = client.get_driving_distances(body.origin, body.destinations)
    except DistanceMatrixRequestError as e:
        raise HTTPException(
            502,
            detail={"status": "error", "reason": e.reason, "message": e.message},
        ) from e
    except ValueError as e:
        # blank origin / destinations rejected by DistanceQuery
        raise HTTPException(
            422, detail={"status": "error", "message": str(e)}
        ) from e
    return {"status": "success", "data": data}


@router.get("/config")
def distance_config(settings: Settings = Depends(get_settings)):
    try:
        batch_size = settings.DISTANCE_BATCH_SIZE
    except ConfigurationError as e:
        raise HTTPException(
            503, detail={"status": "error", "message": str(e)}
        ) from e
    return {
        "batch_size": batch_size,
        "api_key_configured": bool(settings.GOOGLE_API_KEY),
    }
