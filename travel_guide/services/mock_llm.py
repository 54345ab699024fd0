"""
Mock LLM Client.
Returns a fixed-shape travel guide built from the prompt, so the service can
run without an API key.
"""
import re
import logging
from typing import Optional

logger = logging.getLogger(__name__)

GUIDE_TEMPLATE = """ITINERARY
Day 1: Arrival in {destination}
Check in and take an easy walk around the old town.
- Pick up a local transit card
- Dinner near the hotel

Day 2: Highlights of {destination}
- Morning guided city tour
- Visit the main museum
* Sunset viewpoint

Day 3: Departure
Relaxed breakfast, then head to the airport.

FLIGHTS & ACCOMMODATIONS
### FLIGHT PRICE COMPARISON

| Airline | Est. Price ({currency}) | Duration | Transit | Booking Link |
|:---|:---|:---|:---|:---|
| [SkyLine](https://www.skyline.example) | 540 | 11h 20m | Direct | [Book on SkyLine](https://www.skyline.example) |
| [Globe Air](https://www.globeair.example) | 460 | 14h 05m | 1 stop in Dubai, 2h 30m | [Book on Globe Air](https://www.globeair.example) |
| [Horizon](https://www.horizon.example) | 495 | 13h 40m | 1 stop in Istanbul, 1h 50m | [Book on Horizon](https://www.horizon.example) |

Stay: [Central Guesthouse](https://guesthouse.example) from 80 {currency} per night.

SAFETY AND CRIME
Watch for pickpockets in crowded tourist areas.

HEALTH INFORMATION
No special vaccinations required. Carry travel insurance.

ENVIRONMENTAL AND DISASTERS
Mild weather expected; pack a light rain jacket.

TRAVEL TIPS
Buy museum tickets online to skip the queues.
"""


class MockLLMClient:
    """Offline stand-in for the guide model."""

    def __init__(self):
        self.model = "mock-guide"

    def _extract(self, pattern: str, text: str, default: str) -> str:
        match = re.search(pattern, text)
        return match.group(1).strip() if match else default

    async def chat(
        self,
        messages: list[dict],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        model: Optional[str] = None
    ) -> str:
        """Answer a guide prompt with the template filled in."""
        user_msg = next((m["content"] for m in reversed(messages) if m["role"] == "user"), "")
        destination = self._extract(r'from .*? to (.+?)\.\s', user_msg, "your destination")
        currency = self._extract(r'Est\. Price \((\w+)\)', user_msg, "USD")
        logger.debug(f"Mock guide for destination={destination}, currency={currency}")
        return GUIDE_TEMPLATE.format(destination=destination, currency=currency)
