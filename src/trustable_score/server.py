"""Trustable Score MCP Server.

FastMCP server exposing the Trustable API and the offline estimator as tools.
Run: trustable-score-mcp
"""

from __future__ import annotations

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from .core.client import TrustableClient
from .core.models import ScoreSignals
from .core.scoring import estimate_score, get_quick_wins, rating_for_score

logger = logging.getLogger(__name__)

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=True)
OFFLINE = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=False)

mcp = FastMCP(
    "Trustable Score",
    instructions="Measure how visible a brand is in AI-generated answers across ChatGPT, Claude, Perplexity and Gemini, and get GEO recommendations to improve it.",
)


def _get_client() -> TrustableClient:
    return TrustableClient.from_env()


# ─── Tool 1: Score ───────────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def trustable_score(brand: str) -> dict:
    """Trustable Score (0-100) for a brand with its component breakdown.

    Args:
        brand: Brand name to look up, e.g. 'Notion'.
    """
    result = await _get_client().get_score(brand)
    score = result.get("trustableScore") if isinstance(result, dict) else None
    if isinstance(score, (int, float)) and "rating" not in result:
        result = {**result, "rating": rating_for_score(score).value}
    return result


# ─── Tool 2: Analysis ────────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def trustable_analyze(
    query: str,
    include_competitors: bool = True,
    platforms: Optional[list[str]] = None,
) -> dict:
    """Full AI visibility analysis across platforms, with competitors and recommendations.

    Args:
        query: Brand name or URL to analyze.
        include_competitors: Include competitor comparison. Default True.
        platforms: Subset of 'chatgpt', 'claude', 'perplexity', 'gemini'. Default all.
    """
    return await _get_client().analyze(query, include_competitors=include_competitors, platforms=platforms)


# ─── Tool 3: Recommendations ─────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def trustable_recommendations(brand: str) -> dict:
    """Prioritized GEO recommendations for improving a brand's AI visibility.

    Args:
        brand: Brand name to analyze.
    """
    recommendations = await _get_client().get_recommendations(brand) or []
    return {
        "brand": brand,
        "recommendations": recommendations,
        "total": len(recommendations),
    }


# ─── Tool 4: Local Estimate ──────────────────────────────────────────────────


@mcp.tool(annotations=OFFLINE)
def trustable_estimate(
    platform_count: int = 0,
    has_wikidata: bool = False,
    has_google_business: bool = False,
    has_schema_markup: bool = False,
    content_age: Optional[float] = None,
    has_comparison_content: bool = False,
) -> dict:
    """Estimate a Trustable Score offline from publicly observable signals.

    Args:
        platform_count: Platforms with presence (website, Medium, LinkedIn...).
        has_wikidata: Brand has a Wikidata entry.
        has_google_business: Brand has a Google Business Profile.
        has_schema_markup: Site uses JSON-LD schema markup.
        content_age: Average content age in months.
        has_comparison_content: Site has comparison or listicle content.
    """
    signals = ScoreSignals(
        platform_count=platform_count,
        has_wikidata=has_wikidata,
        has_google_business=has_google_business,
        has_schema_markup=has_schema_markup,
        content_age=content_age,
        has_comparison_content=has_comparison_content,
    )
    score = estimate_score(signals)
    rating = rating_for_score(score)
    return {
        "estimated_score": score,
        "rating": rating.value,
        "signals": signals.model_dump(),
        "summary": f"Estimated Trustable Score: {score}/100 ({rating.value}). Use trustable_score for a measured result.",
    }


# ─── Tool 5: Quick Wins ──────────────────────────────────────────────────────


@mcp.tool(annotations=OFFLINE)
def trustable_quick_wins() -> dict:
    """Highest-ROI actions to improve AI visibility. No arguments needed."""
    wins = get_quick_wins()
    return {
        "title": "GEO Quick Wins",
        "quick_wins": [w.model_dump() for w in wins],
        "total": len(wins),
    }


def main():
    """Entry point for the CLI command."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logger.info("Starting Trustable Score MCP server")
    mcp.run()


if __name__ == "__main__":
    main()
