STYLE_DESCRIPTIONS = {
    "clean_studio": (
        "CLEAN STUDIO: High-end professional studio lighting with soft-box shadows, neutral background tones, "
        "even illumination across the subject, professional color temperature"
    ),
    "luxury_brand": (
        "COUTURE MOOD (Luxury Brand): Editorial high-contrast lighting with premium color grading, rich deep "
        "shadows, sophisticated mood lighting, luxury fashion magazine aesthetic"
    ),
    "soft_natural": (
        "SOFT NATURAL: Soft diffused daylight simulation, gentle rim lighting, warm organic color tones, "
        "natural window light effect, golden hour warmth"
    ),
    "dark_premium": (
        "DARK PREMIUM: Selective dramatic lighting with deep moody shadows, high contrast ratio, spotlight "
        "effect on subject, noir-inspired atmosphere"
    ),
    "ecommerce_white": (
        "E-COMMERCE WHITE: Pure infinity white backdrop, completely even shadowless lighting, accurate product "
        "colors, commercial catalog quality"
    ),
    "royal_monochrome": (
        "SILVER SCREEN (Royal Monochrome): Stark black-and-white contrast with onyx shadows, classic Hollywood "
        "glamour lighting, timeless elegance"
    ),
    "instagram_editorial": (
        "INSTAGRAM EDITORIAL: Trendy lifestyle color grading, soft bokeh backgrounds, influencer-worthy "
        "aesthetics, vibrant yet natural tones"
    ),
}

ENVIRONMENT_DESCRIPTIONS = {
    "keep_original": (
        "Enhance and refine the original background with improved lighting, depth, and clarity while "
        "maintaining its authentic character"
    ),
    "clean_studio": (
        "Ultra-realistic professional photography studio backdrop with seamless gradient, subtle vignette, "
        "controlled lighting environment"
    ),
    "premium_lifestyle": (
        "Aspirational luxury lifestyle environment with tasteful interior elements, soft ambient lighting, "
        "premium textures"
    ),
    "royal_bridal_chamber": (
        "Ultra-realistic royal bridal chamber environment: ivory and warm beige wall panels with intricate gold "
        "trim, architectural moldings, soft diffused chandelier lighting, luxurious draped curtains, polished "
        "marble accents, $10,000 photo set quality"
    ),
    "garden_pavilion": (
        "Elegant outdoor garden pavilion setting: manicured greenery, classical stone columns, soft natural "
        "daylight filtering through, romantic floral accents, aristocratic estate atmosphere"
    ),
    "palace_corridor": (
        "Grand palace corridor: ornate ceiling details, gilded frames, rich burgundy and gold color palette, "
        "dramatic natural light from tall windows, royal heritage ambiance"
    ),
}

PHOTO_TYPE_INSTRUCTIONS = {
    "product": (
        "This is a PRODUCT photo. Focus on: showcasing the product clearly, accurate colors, appealing "
        "presentation, remove any distracting elements, ensure the product is the hero of the image."
    ),
    "portrait": (
        "This is a PORTRAIT/INFLUENCER photo. Focus on: flattering lighting on the face, natural skin texture "
        "(no plastic look), natural pose correction, eye enhancement, professional headshot quality while "
        "maintaining the person's authentic identity."
    ),
    "lifestyle": (
        "This is a LIFESTYLE/BRAND photo. Focus on: storytelling composition, aspirational mood, "
        "brand-appropriate atmosphere, lifestyle context enhancement, making the scene feel premium and desirable."
    ),
}

SKIN_FINISH_INSTRUCTIONS = {
    "light": """FREQUENCY SEPARATION SKIN FINISH (Light):
- Apply FREQUENCY SEPARATION technique: treat skin as a TEXTURE LAYER, not flat color
- Remove only small blemishes, tiny spots, and minor imperfections
- Keep FULL skin texture and all pores visible at the frequency level
- Do NOT smooth or blur any skin areas - maintain high-frequency detail
- Only touch up the most obvious temporary marks
- Preserve complete natural appearance with full texture integrity""",
    "medium": """FREQUENCY SEPARATION SKIN FINISH (Medium - Recommended):
- Apply FREQUENCY SEPARATION technique: separate high-frequency texture from low-frequency color
- Smooth skin evenly at the color level while maintaining texture layer
- Remove acne, dark spots, scars, and uneven skin tone from the color layer
- Keep natural pores visible in the texture layer but refined
- Balance between retouching and realism using frequency separation
- Apply to primary subject face only if multiple people exist
- This prevents the "plastic AI face" look by preserving real skin texture""",
    "pro": """FREQUENCY SEPARATION SKIN FINISH (Pro Retouch):
- Apply professional FREQUENCY SEPARATION: full control of texture and color layers
- High-end beauty retouch with smooth even skin tone on color layer
- Remove all blemishes, spots, scars, and imperfections
- Maintain realistic pore texture in high-frequency layer (subtle but visible)
- Professional magazine-quality finish using true frequency separation
- Apply only to primary subject if multiple faces exist
- Result should look like expert Photoshop frequency separation, NOT AI blur""",
}

SKIN_FINISH_RULES = """CRITICAL FREQUENCY SEPARATION RULES:
- Do NOT change face shape or facial features
- Do NOT enlarge eyes or lips
- Do NOT apply makeup or beauty filters
- Do NOT create plastic, doll-like, or unnaturally smooth skin
- Do NOT blur skin to the point of losing the high-frequency texture layer
- PRESERVE the person's age and natural appearance
- PRESERVE their identity completely
- Use TRUE frequency separation technique - texture layer stays intact"""

ULTRA_HD_INSTRUCTION = (
    "OUTPUT FIDELITY: MASTER PORTFOLIO (Ultra HD) - Maximum sharpness, clarity, and detail. DSLR-quality with "
    "f/1.4 lens depth simulation, professional depth of field, 4K-ready output."
)
HD_INSTRUCTION = (
    "OUTPUT FIDELITY: EDITORIAL PRINT (HD) - High sharpness and clarity, print-ready quality, balanced detail "
    "preservation."
)

AI_PHOTOGRAPHER_INSTRUCTION = """AI PHOTOGRAPHER MODE (AUTO-OPTIMIZE):
Analyze the image and automatically determine:
- Best camera angle correction (fix any perspective distortion)
- Best crop and composition (apply rule of thirds, golden ratio)
- Best lighting direction and intensity
- Best color grading for the style
- Natural pose corrections if needed
Make all these decisions automatically without user input."""

SECTION_RULE = "=" * 63

PHOTO_STUDIO_PROMPT_TEMPLATE = """MASTER BACKGROUND ENGINE PROMPT:
You are an elite virtual creative director specialized in ultra-realistic professional bridal photography output.

{rule}
STRICT SUBJECT LOCK (PRIMARY RULE - NON-NEGOTIABLE):
{rule}
Face, body, makeup, jewelry, dress, pose = 100% LOCKED.
- Preserve the original character EXACTLY as provided
- SAME face, SAME facial structure, SAME expression - NO deviation
- SAME skin texture and skin tone (NO tone change whatsoever)
- SAME makeup application, jewelry placement, hairstyle - pixel perfect
- SAME dress, embroidery patterns, fabric texture, and accessories
- SAME body proportions and pose - mathematically identical
- NO facial alteration, NO beautification changes, NO stylization
- The human subject must be RE-RENDERED, not RE-CREATED

{photo_type_instruction}

{rule}
BACKGROUND GENERATION INSTRUCTION:
{rule}
Artistic Style (Global Illumination): {style_description}

Environment Context (World Architecture): {environment_description}

Apply the selected background environment with realistic studio lighting, natural shadows, and cinematic depth. \
Background elements must remain soft and out of focus where appropriate to keep the subject dominant. \
The environment should enhance, never compete with, the subject.

{quality_instruction}

{photographer_instruction}

{skin_finish_instruction}

{rule}
PHOTOGRAPHY STYLE:
{rule}
- DSLR bridal photography quality
- Shallow depth of field with f/1.4 lens simulation
- Accurate color science with professional white balance
- Soft light falloff with natural gradient transitions
- Professional wedding editorial quality output
- Cinematic depth with proper foreground/background separation

{rule}
NEGATIVE PROMPT (ABSOLUTE PROHIBITIONS):
{rule}
face change, makeup change, dress change, jewelry change, hairstyle change, extra limbs, extra fingers, \
distorted anatomy, plastic skin, AI artifacts, cartoon style, CGI look, fantasy elements, fake lighting, \
unrealistic background, blur on subject, identity alteration, age change, skin tone change, expression change, \
pose change, body proportion change

{rule}
EXECUTION:
{rule}
Transform ONLY the environment and lighting while keeping the human subject mathematically identical to the source. \
This is NON-DESTRUCTIVE IDENTITY EDITING.

After completing the enhancement, provide a brief 2-sentence creative director's note explaining what was \
enhanced and how the subject's identity was preserved.

EDIT THE PROVIDED IMAGE following all these instructions. Return the enhanced version."""


def build_photo_studio_prompt(
    photo_type: str,
    style_preset: str,
    background_option: str,
    output_quality: str,
    ai_photographer_mode: bool = False,
    skin_finish_enabled: bool = False,
    skin_finish_intensity: str | None = None,
) -> str:
    """
    Compose the enhancement prompt. Unknown presets fall back to the clean
    studio look on the original background; skin finishing never applies to
    product photos.
    """
    skin_finish = ""
    if skin_finish_enabled and photo_type != "product" and skin_finish_intensity in SKIN_FINISH_INSTRUCTIONS:
        skin_finish = f"{SKIN_FINISH_INSTRUCTIONS[skin_finish_intensity]}\n\n{SKIN_FINISH_RULES}"

    return PHOTO_STUDIO_PROMPT_TEMPLATE.format(
        rule=SECTION_RULE,
        photo_type_instruction=PHOTO_TYPE_INSTRUCTIONS.get(photo_type, PHOTO_TYPE_INSTRUCTIONS["portrait"]),
        style_description=STYLE_DESCRIPTIONS.get(style_preset, STYLE_DESCRIPTIONS["clean_studio"]),
        environment_description=ENVIRONMENT_DESCRIPTIONS.get(
            background_option, ENVIRONMENT_DESCRIPTIONS["keep_original"]
        ),
        quality_instruction=ULTRA_HD_INSTRUCTION if output_quality == "ultra_hd" else HD_INSTRUCTION,
        photographer_instruction=AI_PHOTOGRAPHER_INSTRUCTION if ai_photographer_mode else "",
        skin_finish_instruction=skin_finish,
    )
