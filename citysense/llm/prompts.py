"""
Langchain Prompt Templates
Defines prompts for daily recommendations, search, city lookup and the concierge
"""

from langchain_core.prompts import PromptTemplate

# ============================================
# Event Structure Hint (shared)
# ============================================

EVENT_STRUCTURE_HINT = """
RETURN ONLY A RAW JSON ARRAY. Do not use Markdown.
Each object in the array must strictly follow this structure:
{
  "id": "string",
  "title": "string",
  "description": "string",
  "date": "string (format: 'Mon, Oct 25 • 7:00 PM')",
  "location": "string (Venue name)",
  "category": "string (e.g., Music, Food, Arts)",
  "price": "string (e.g., 'Free', '$20')",
  "recommendationLevel": "Highly Recommended" | "Consider" | "Not Recommended",
  "justification": "string",
  "link": "string (URL to buy tickets or view event info)",
  "imageUrl": "string (URL to an image of the event/venue if found)",
  "coordinates": { "lat": number, "lng": number }
}
"""

# ============================================
# Daily Recommendations Prompt
# ============================================

DAILY_RECOMMENDATIONS_PROMPT = PromptTemplate(
    input_variables=["city", "interests", "top_artists_line"],
    template="""Act as a local event discovery agent for {city}.
User Interests: {interests}.
{top_artists_line}

Scan for 8 to 12 distinct, real, or realistic events happening in {city} today or this upcoming weekend.

Requirements:
1. Variety: Include a mix of Music, Nightlife, Food, Arts, and Workshops.
2. Relevance: Prioritize events matching the user's interests ({interests}), but also include popular general events.
3. Data Quality:
   - Date: Format as "Mon, Oct 25 • 7:00 PM" (Day, Month Date • Time).
   - Price: "Free", "Starts at $20", or "$50".
   - Location: Venue name and neighborhood (e.g. "The Fillmore, South Beach").
   - Link: Provide a real URL to the event page or ticket site.
4. Coordinates: Provide estimated lat/lng for mapping.

Rank them based on the user's profile.

{structure_hint}""",
    partial_variables={"structure_hint": EVENT_STRUCTURE_HINT}
)

# ============================================
# Search Prompt
# ============================================

SEARCH_PROMPT = PromptTemplate(
    input_variables=["city", "query"],
    template="""Act as a local event discovery agent for {city}.
User Search Query: "{query}".

Search for 6 to 10 distinct, real events happening in {city} coming up soon that match the search query.

Requirements:
1. Relevance: Strictly match the query (e.g., if "Jazz", only Jazz events).
2. Data Quality:
   - Date: Format as "Mon, Oct 25 • 7:00 PM".
   - Price: "Free", "$20", etc.
   - Location: Venue name.
   - Link: Provide a real URL to the event page if found.
3. Coordinates: Provide estimated lat/lng.

{structure_hint}""",
    partial_variables={"structure_hint": EVENT_STRUCTURE_HINT}
)

# ============================================
# City From Coordinates Prompt
# ============================================

CITY_FROM_COORDS_PROMPT = PromptTemplate(
    input_variables=["lat", "lng"],
    template=(
        "I am at latitude {lat} and longitude {lng}. What city and state/country is this? "
        'Return only the City, Country string (e.g. "Miami, USA").'
    )
)

# ============================================
# Concierge System Instruction
# ============================================

CONCIERGE_SYSTEM_PROMPT = PromptTemplate(
    input_variables=["interests", "current_city", "top_artists_line"],
    template="""You are CitySense, an expert AI travel planner and concierge.
User Profile:
- Interests: {interests}
- Current City: {current_city}
{top_artists_line}

Your goal is to provide curated, context-aware recommendations.
When suggesting specific venues, events, or restaurants, ALWAYS try to rank them as "Highly Recommended", "Consider", or "Not Recommended" with a brief justification.
Be conversational, helpful, and concise.
If the user asks about specific music genres (like Afrobeats, R&B), prioritize those.
If the user asks about their favorite artists, check if they are in town using search."""
)


def build_daily_prompt(city: str, interests, spotify_connected: bool, top_artists) -> str:
    top_artists_line = f"User's Top Artists: {', '.join(top_artists)}." if spotify_connected else ""
    return DAILY_RECOMMENDATIONS_PROMPT.format(
        city=city,
        interests=", ".join(interests),
        top_artists_line=top_artists_line
    )


def build_search_prompt(city: str, query: str) -> str:
    return SEARCH_PROMPT.format(city=city, query=query)


def build_city_prompt(lat: float, lng: float) -> str:
    return CITY_FROM_COORDS_PROMPT.format(lat=lat, lng=lng)


def build_concierge_prompt(interests, current_city: str, spotify_connected: bool, top_artists) -> str:
    top_artists_line = f"- Top Artists: {', '.join(top_artists)}" if spotify_connected else ""
    return CONCIERGE_SYSTEM_PROMPT.format(
        interests=", ".join(interests),
        current_city=current_city,
        top_artists_line=top_artists_line
    )
