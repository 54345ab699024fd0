"""
Guide Generator.
Prompts the LLM for a six-section travel guide and splits the answer.
"""
import logging
from typing import Optional

from .llm_client import get_llm_client
from .sections import split_sections
from ..config import get_model_for_mode
from ..errors import GuideGenerationError
from ..models.search_params import SearchParams
from ..models.travel import GroundingSource, TravelData


GUIDE_SYSTEM_PROMPT = """You are a travel expert. You write complete, practical travel guides
with accurate, current information and real booking URLs."""

logger = logging.getLogger(__name__)


def build_guide_prompt(params: SearchParams, media_description: Optional[str] = None) -> str:
    """Format the trip parameters into the guide request."""
    currency = params.currency
    prompt = f"""Create a comprehensive travel guide for a trip from {params.origin} to {params.destination}.
Dates: From {params.check_in.isoformat()} to {params.check_out.isoformat()} ({params.trip_days()} days).
Style: {params.traveler_type}, Travelers: {params.person}, Budget: {params.budget} {currency}.

CRITICAL SECTIONS TO INCLUDE:
1. "ITINERARY": Day-by-day plan with specific activities. Start each day with "Day N:" and list activities as "- " bullets.
2. "FLIGHTS & ACCOMMODATIONS":
   - MUST include a "FLIGHT PRICE COMPARISON" section with a Markdown table.
   - The table must compare at least 3 major airlines relevant to the route.
   - Columns: Airline, Est. Price ({currency}), Duration, Transit, Booking Link.
   - IMPORTANT for "Transit" column: If the flight is direct, state 'Direct'. If there are layovers, specify the city and the duration of the layover (e.g., '1 stop in Dubai, 2h 30m').
   - The "Booking Link" column MUST contain a functional Markdown link to the airline's official booking page (e.g., [Book on AirlineName](https://www.airline.com)).
   - Include 2-3 specific accommodation recommendations with price ranges and direct booking links.
3. "SAFETY AND CRIME": Relevant alerts.
4. "HEALTH INFORMATION": Vaccinations or health tips.
5. "ENVIRONMENTAL AND DISASTERS": Weather and local conditions.
6. "TRAVEL TIPS": Useful hacks.

Note: Use real-time data where possible for the {params.check_in.isoformat()} travel period."""

    if media_description:
        prompt += f"\n\nIncorporate this analysis of the traveler's image or video:\n{media_description}"
    return prompt


class GuideGenerator:
    """Generates travel guides with the configured LLM."""

    def __init__(self):
        self.llm = get_llm_client()

    async def generate(
        self,
        params: SearchParams,
        media_description: Optional[str] = None,
        sources: Optional[list[GroundingSource]] = None
    ) -> TravelData:
        """
        Generate a travel guide.

        Args:
            params: Trip parameters
            media_description: Optional text analysis of an uploaded image or video
            sources: Grounding citations to attach, passed through as given

        Returns:
            New TravelData with the six raw sections filled in

        Raises:
            GuideGenerationError: if the LLM call fails or returns nothing
        """
        messages = [
            {"role": "system", "content": GUIDE_SYSTEM_PROMPT},
            {"role": "user", "content": build_guide_prompt(params, media_description)}
        ]
        model = get_model_for_mode(params.plan_mode.value)

        try:
            text = await self.llm.chat(messages, model=model)
        except Exception as e:
            logger.error(f"Guide generation failed for {params.destination}: {e}")
            raise GuideGenerationError(f"The travel guide could not be generated: {e}") from e

        if not text or not text.strip():
            raise GuideGenerationError("The travel guide came back empty")

        sections = split_sections(text)
        logger.info(f"Generated guide for {params.destination} with model {model}")
        return TravelData(sources=list(sources or []), **sections)


# Global generator instance
generator: Optional[GuideGenerator] = None


def get_generator() -> GuideGenerator:
    """Get or create the global guide generator."""
    global generator
    if generator is None:
        generator = GuideGenerator()
    return generator
