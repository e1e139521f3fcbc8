from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from datetime import datetime, timezone
from functools import lru_cache
from typing import Optional, List, Dict, Any
import logging

from config import settings
from models.entity import Record
from services.diff_formatter import DiffFormatter, LineStats
from services.diff_state_builder import DiffStateBuilder, RAW_STATE, create_default_builder
from services.errors import ConfigurationError, EntityCapabilityError, SchemaInconsistencyError

logger = logging.getLogger(__name__)

router = APIRouter()

class CompareRevisionsRequest(BaseModel):
    left: Record
    right: Record

@lru_cache
def get_builder() -> DiffStateBuilder:
    """One builder per process; settings are read once at startup"""
    return create_default_builder()

@router.post("/revisions")
async def compare_revisions(
    request_body: CompareRevisionsRequest,
    state: Optional[str] = Query(None, description="Diff state used for the rows (raw, raw_plain)"),
    show_header: bool = Query(False, description="Insert 'Line N' header rows before each block"),
    show_full: bool = Query(False, description="Keep every unchanged line instead of context only"),
    builder: DiffStateBuilder = Depends(get_builder),
):
    """Compare two revisions of a record field by field"""
    try:
        diff_states = builder.compare_revisions(request_body.left, request_body.right)
    except EntityCapabilityError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SchemaInconsistencyError as e:
        logger.error(f"Schema inconsistency: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except ConfigurationError as e:
        logger.error(f"Comparison configuration error: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    state = state or settings.DIFF_DEFAULT_STATE
    formatter = DiffFormatter(
        leading_context_lines=settings.DIFF_CONTEXT_LINES,
        trailing_context_lines=settings.DIFF_CONTEXT_LINES,
        show_full=show_full,
    )
    line_stats = LineStats()

    fields: List[Dict[str, Any]] = []
    for diff_state in diff_states:
        rows_state = state if state in diff_state.states else RAW_STATE
        lines = diff_state.states[rows_state]
        item = diff_state.model_dump()
        item["rows_state"] = rows_state
        item["rows"] = formatter.format(lines.left, lines.right, show_header=show_header, line_stats=line_stats)
        fields.append(item)

    return {
        "left_revision_id": request_body.left.revision_id,
        "right_revision_id": request_body.right.revision_id,
        "state": state,
        "field_count": len(fields),
        "fields": fields,
        "generated_at": datetime.now(timezone.utc).isoformat(),
    }

@router.get("/settings")
async def get_compare_settings(builder: DiffStateBuilder = Depends(get_builder)):
    """Current compare settings snapshot"""
    return builder.config.to_dict()
