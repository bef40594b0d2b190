"""Enhancement API routes."""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_enhancer
from ..schemas import (
    EnhanceRequest,
    EnhanceResponse,
    DetectRequest,
    DetectResponse,
    FrameworkCandidateResponse,
    FrameworkInfo,
    FrameworkListResponse,
    ErrorResponse,
)
from ...core.exceptions import ValidationError
from ...enhancement import PromptEnhancer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["enhancement"])


@router.post(
    "/enhance",
    response_model=EnhanceResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
def enhance_prompt(
    request: EnhanceRequest,
    enhancer: PromptEnhancer = Depends(get_enhancer)
) -> EnhanceResponse:
    """
    Rewrite an instruction into a structured prompt.

    Detects applicable frameworks (TCREI, RSTI, TFCDC), classifies the use
    case and composes the enhanced prompt. Parameters left out fall back to
    the configured defaults. The result is saved when ``user_id`` is given.
    """
    start_time = time.time()

    overrides = {
        "audienceLevel": request.audience_level,
        "tone": request.tone,
        "outputFormat": request.output_format,
        "wordCount": request.word_count,
    }
    defaults = enhancer.config.default_parameters
    parameters = {
        **(defaults.to_dict() if defaults else {}),
        **{k: v for k, v in overrides.items() if v is not None},
    }

    try:
        result = enhancer.enhance(
            request.prompt,
            parameters=parameters,
            user_id=request.user_id,
            save=request.save
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Enhancement failed")
        raise HTTPException(status_code=500, detail=str(e))

    enhanced = result.enhanced
    return EnhanceResponse(
        success=True,
        original_prompt=enhanced.source_input,
        enhanced_prompt=enhanced.final_prompt,
        frameworks_applied=enhanced.framework_names,
        use_case=enhanced.use_case.value,
        parameters=enhanced.parameters.to_dict(),
        sections=list(enhanced.sections),
        candidates=[FrameworkCandidateResponse(**c.to_dict()) for c in result.candidates],
        record_id=result.record_id,
        processing_time_ms=(time.time() - start_time) * 1000
    )


@router.post("/detect", response_model=DetectResponse)
async def detect(
    request: DetectRequest,
    enhancer: PromptEnhancer = Depends(get_enhancer)
) -> DetectResponse:
    """
    Classify text against the framework catalog without transforming it.

    Every catalog framework is returned, applicable or not, with the
    signals that matched.
    """
    analysis = enhancer.analyze(request.prompt)
    return DetectResponse(
        success=True,
        use_case=analysis["use_case"],
        candidates=[FrameworkCandidateResponse(**c) for c in analysis["candidates"]],
        applicable=analysis["applicable"]
    )


@router.get("/frameworks", response_model=FrameworkListResponse)
async def list_frameworks(
    enhancer: PromptEnhancer = Depends(get_enhancer)
) -> FrameworkListResponse:
    """List the framework catalog."""
    frameworks = [FrameworkInfo(**f) for f in enhancer.list_frameworks()]
    return FrameworkListResponse(frameworks=frameworks, total=len(frameworks))
