import logging
import os
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.constants import DEFAULT_SANITIZE_POLICY, SANITIZE_POLICIES
from app.schemas.diagram import DiagramInputs
from app.services.diagram_renderer import SVG_MEDIA_TYPE, render
from app.services.history_store import HistoryStore, StorageError, get_history_store
from app.services.sanitizer import SanitizeError, sanitize_inputs

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Diagram"])


def get_sanitize_policy() -> str:
    policy = os.getenv("SANITIZE_POLICY", DEFAULT_SANITIZE_POLICY).lower()
    if policy not in SANITIZE_POLICIES:
        logger.warning(f"Unknown SANITIZE_POLICY '{policy}', using {DEFAULT_SANITIZE_POLICY}")
        return DEFAULT_SANITIZE_POLICY
    return policy


def diagram_inputs(
    n: str = Query(..., description="Network address"),
    r: str = Query(..., description="Router address"),
    h0: str = Query(..., description="Host 0 address"),
    h1: str = Query(..., description="Host 1 address"),
    br: str = Query(..., description="Broadcast address"),
) -> DiagramInputs:
    return DiagramInputs(network=n, router=r, host0=h0, host1=h1, broadcast=br)


def render_sanitized(inputs: DiagramInputs, policy: str) -> str:
    try:
        cleaned = sanitize_inputs(inputs, policy)
    except SanitizeError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid value for '{e.field}': {e}",
        )
    return render(cleaned)


@router.get("/ipv4", status_code=status.HTTP_200_OK)
def render_diagram(
    inputs: DiagramInputs = Depends(diagram_inputs),
    policy: str = Depends(get_sanitize_policy),
):
    """ Render the network diagram without saving it """
    logger.info("Render handler")
    svg = render_sanitized(inputs, policy)
    return Response(content=svg, media_type=SVG_MEDIA_TYPE)


@router.get("/save", status_code=status.HTTP_200_OK)
def save_diagram(
    email: str = Query(...),
    inputs: DiagramInputs = Depends(diagram_inputs),
    policy: str = Depends(get_sanitize_policy),
    store: HistoryStore = Depends(get_history_store),
):
    """ Render the network diagram and keep it as the email's last input """
    logger.info("Save handler")
    svg = render_sanitized(inputs, policy)
    try:
        store.upsert(email, svg)
    except StorageError as e:
        logger.error(f"Failed to save diagram: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to save diagram")
    return Response(status_code=status.HTTP_200_OK)


@router.get("/history", status_code=status.HTTP_200_OK)
def get_history(
    email: str = Query(...),
    store: HistoryStore = Depends(get_history_store),
):
    """ Return the last saved diagram for an email, or 204 if there is none """
    logger.info("History handler")
    try:
        last_input = store.get_last_input(email)
    except StorageError as e:
        logger.critical(f"Database error when retrieving history: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to retrieve history")

    if last_input is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return Response(content=last_input, media_type=SVG_MEDIA_TYPE)
