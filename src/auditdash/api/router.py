"""Master API router. The SPA fallback is mounted last so it only sees unmatched paths."""

from fastapi import APIRouter

from auditdash.api.routes import diff, findings, health, reports, spa, summary, trends

api_router = APIRouter()
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(reports.router)
api_router.include_router(trends.router)
api_router.include_router(findings.router)
api_router.include_router(diff.router)
api_router.include_router(summary.router)
api_router.include_router(spa.router)
