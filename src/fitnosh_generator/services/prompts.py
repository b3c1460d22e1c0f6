"""Food photography prompt. Branding is never requested from the model."""

from datetime import datetime

from fitnosh_generator.models import MealPlan

FOOD_PHOTO_TEMPLATE = """Generate a professional Instagram food photography image:

FOOD COMPOSITION:
- Breakfast: {breakfast}
- Snack: {snack}
- Lunch: {lunch}

SPACE FOR LOGO:
- Leave completely clear, empty space in the TOP LEFT corner
- No text, food items, decorations, or any elements in this area
- Ensure plain dark background in top left corner
- This space is reserved for external logo placement

VISUAL STYLE:
- Professional food photography with perfect focus and sharp details
- Natural lighting with studio-quality setup
- Flat lay arrangement on dark black background
- Vibrant, appetizing colors with high contrast
- Clean, modern composition
- Each food item clearly visible and beautifully presented
- ASPECT RATIO: 1:1 (Instagram square format)
- Square composition optimized for Instagram posts
- No Borders

COLORS TO USE:
- Incorporate vibrant yellow (#FDCF16) accent elements:
  * Yellow napkins, utensils, or small containers
  * Yellow garnishes or accent elements
  * Yellow packaging details (NO TEXT OR LOGOS)
- Use black plates, bowls, and serving elements
- Dark background for dramatic contrast

FOOD PRESENTATION:
- {day} Indian street food aesthetic
- Premium, restaurant-quality plating
- Authentic Indian flavors and ingredients visible
- Street food style but elevated presentation
- Leave space in top-left area for logo overlay
- CRITICAL: Leave clear margins around edges for text labels:
  * Bottom 15% of image should have minimal food items for text space
  * Top right corner should have some empty dark background
  * Arrange food items in center-focused composition
  * Ensure adequate negative space around food for text overlay

ABSOLUTELY CRITICAL - NO BRANDING IN AI GENERATION:
- Generate ONLY pure food photography
- NO logos, text, labels, branding, or written elements ANYWHERE
- NO Street Nosh logos or any other brand logos
- NO decorative text or graphic elements
- NO company names or brand references
- NO borders, frames, or decorative elements around the image
- NO yellow borders or colored frames
- Just clean food photography with plain dark background
- All branding will be added externally as overlay"""

VARIATION_TEMPLATE = """

VARIATION REQUIREMENTS:
- Generate a unique composition each time
- Vary the arrangement and styling
- Different camera angles and food placement
- Unique presentation style
- Random seed: {seed}
- Timestamp: {timestamp}"""


def build_food_prompt(meal: MealPlan, *, seed: int, generated_at: datetime) -> str:
    """Prompt for one meal. Seed and timestamp vary the composition between calls."""
    brief = FOOD_PHOTO_TEMPLATE.format(
        breakfast=meal.Breakfast,
        snack=meal.Snack,
        lunch=meal.Lunch,
        day=meal.Day,
    )
    return brief + VARIATION_TEMPLATE.format(
        seed=seed,
        timestamp=generated_at.isoformat(),
    )
