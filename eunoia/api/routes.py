"""API routes for the achievement engine"""
import logging
from datetime import datetime, timezone, tzinfo
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from eunoia import __version__
from eunoia.api.models import (
    EntriesRequest,
    AchievementInfo, AchievementProgress, AchievementListResponse,
    EvaluationResponse, RecommendationResponse,
    StreakResponse, HealthCheckResponse,
)
from eunoia.api.auth import verify_api_key
from eunoia.config import RATE_LIMIT_ENABLED, get_entry_timezone
from eunoia.exceptions import EunoiaError
from eunoia.gamification.achievement_system import (
    ACHIEVEMENTS,
    evaluate,
    get_achievement,
    get_achievement_recommendations,
)
from eunoia.gamification.streak_system import entry_dates, longest_consecutive_day_run
from eunoia.utils.datetime_helpers import resolve_timezone

logger = logging.getLogger(__name__)

router = APIRouter()

# Per-client limits on the routes below; create_api_application registers it on the app
limiter = Limiter(key_func=get_remote_address, enabled=RATE_LIMIT_ENABLED)


def _request_timezone(payload: EntriesRequest) -> Optional[tzinfo]:
    """Timezone named in the request, else the configured default"""
    if payload.timezone:
        return resolve_timezone(payload.timezone)
    return get_entry_timezone()


@router.get("/api/v1/achievements", response_model=AchievementListResponse)
@limiter.limit("60/minute")
async def list_achievements(
    request: Request,
    api_key: str = Depends(verify_api_key)
):
    """List every achievement in display order (Rate limit: 60/minute)"""
    return AchievementListResponse(
        achievements=[AchievementInfo.from_achievement(a) for a in ACHIEVEMENTS]
    )


@router.get("/api/v1/achievements/{achievement_id}", response_model=AchievementInfo)
@limiter.limit("60/minute")
async def get_achievement_endpoint(
    request: Request,
    achievement_id: str,
    api_key: str = Depends(verify_api_key)
):
    """Get one achievement's metadata (Rate limit: 60/minute)"""
    return AchievementInfo.from_achievement(get_achievement(achievement_id))


@router.post("/api/v1/achievements/evaluate", response_model=EvaluationResponse)
@limiter.limit("30/minute")
async def evaluate_achievements_endpoint(
    request: Request,
    payload: EntriesRequest,
    api_key: str = Depends(verify_api_key)
):
    """
    Evaluate achievements for a user's entries

    The caller sends the entries it already fetched; nothing is stored.
    Rate limit: 30 requests per minute
    """
    try:
        tz = _request_timezone(payload)
        results = evaluate(payload.entries, tz)

        return EvaluationResponse(
            results=[AchievementProgress.from_result(r) for r in results],
            total_unlocked=sum(1 for r in results if r.unlocked),
            total_achievements=len(results),
        )

    except EunoiaError:
        raise
    except Exception as e:
        logger.error(f"Error evaluating achievements: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.post("/api/v1/achievements/recommendations", response_model=RecommendationResponse)
@limiter.limit("30/minute")
async def achievement_recommendations_endpoint(
    request: Request,
    payload: EntriesRequest,
    limit: int = Query(3, ge=1, le=10),
    api_key: str = Depends(verify_api_key)
):
    """Locked achievements at least half done, closest first (Rate limit: 30/minute)"""
    try:
        tz = _request_timezone(payload)
        recommendations = get_achievement_recommendations(payload.entries, limit=limit, tz=tz)

        return RecommendationResponse(
            recommendations=[AchievementProgress.from_result(r) for r in recommendations]
        )

    except EunoiaError:
        raise
    except Exception as e:
        logger.error(f"Error getting recommendations: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.post("/api/v1/streaks/longest", response_model=StreakResponse)
@limiter.limit("30/minute")
async def longest_streak_endpoint(
    request: Request,
    payload: EntriesRequest,
    api_key: str = Depends(verify_api_key)
):
    """Longest run of consecutive writing days (Rate limit: 30/minute)"""
    try:
        tz = _request_timezone(payload)

        return StreakResponse(
            longest_streak=longest_consecutive_day_run(payload.entries, tz),
            active_days=len(entry_dates(payload.entries, tz)),
        )

    except EunoiaError:
        raise
    except Exception as e:
        logger.error(f"Error calculating streak: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.get("/api/health", response_model=HealthCheckResponse)
@limiter.limit("60/minute")
async def health_check(request: Request):
    """Health check endpoint (Rate limit: 60/minute for monitoring systems)"""
    return HealthCheckResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc)
    )
