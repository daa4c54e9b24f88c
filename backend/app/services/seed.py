"""Sample ideas inserted into an empty database at startup."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from backend.app.schemas.idea import IdeaCreate
from backend.app.services.ideas import IdeaService

logger = logging.getLogger(__name__)

SAMPLE_IDEAS = [
    IdeaCreate(
        what="A personal finance tracker that automatically categorizes expenses.",
        who="Young professionals who want to understand their spending habits.",
        features="1. Auto-categorize transactions\n2. Monthly budget vs actuals view\n3. Export to CSV",
        done_criteria=(
            "Users can securely connect their bank, view categorized transactions "
            "for the last 30 days, and set budget limits."
        ),
        inspiration="Mint, YNAB, Copilot",
    ),
    IdeaCreate(
        what="An AI-powered recipe generator based on ingredients you have in your fridge.",
        who="Home cooks looking to reduce food waste and try new meals.",
        features="1. Input list of ingredients\n2. Generate 3 recipe options\n3. Save favorite recipes",
        done_criteria=(
            "Users can input 'chicken, rice, broccoli' and receive a fully formatted "
            "recipe with step-by-step instructions."
        ),
        inspiration="Supercook, various recipe blogs",
    ),
]


async def seed_sample_ideas(session_factory: async_sessionmaker[AsyncSession]) -> int:
    """
    Insert the sample ideas if there are no ideas yet.

    Failures (for example tables that do not exist yet) are logged and
    never propagate, so startup continues.

    Returns:
        Number of ideas inserted
    """
    try:
        async with session_factory() as db:
            ideas = IdeaService(db)
            if await ideas.count_ideas() > 0:
                return 0
            for sample in SAMPLE_IDEAS:
                await ideas.create_idea(sample, author_user_id=None)
    except Exception as e:
        logger.warning(f"[SEED] Skipping seed data: {e}")
        return 0

    logger.info(f"[SEED] Inserted {len(SAMPLE_IDEAS)} sample ideas")
    return len(SAMPLE_IDEAS)
