CAPTION_SEPARATOR = "---SEPARATOR---"

TONE_DESCRIPTIONS = {
    "bold_salesy": "Bold, energetic, and sales-driven. Use urgency, excitement, and strong action words.",
    "elegant_premium": "Sophisticated, refined, and luxurious. Use polished language that conveys exclusivity.",
    "friendly_casual": "Warm, approachable, and conversational. Like talking to a friend.",
    "minimal_clean": "Simple, modern, and straightforward. No fluff, just key points.",
}

LENGTH_INSTRUCTIONS = {
    "short": "Write a very concise caption of 1-2 lines maximum, followed by a clear CTA.",
    "medium": "Write a medium-length caption with 3-5 bullet points highlighting key benefits, followed by a strong CTA.",
    "long": (
        "Write a detailed caption with comprehensive bullet points covering features, benefits, "
        "trust elements (like warranty, quality), and a compelling CTA at the end."
    ),
}

BANGLA_INSTRUCTION = (
    "Write the caption ENTIRELY in proper Bengali script (বাংলা). Do NOT use transliteration "
    "or romanized Bengali. The output must be readable native Bengali."
)
ENGLISH_INSTRUCTION = "Write the caption in simple, modern, engaging English suitable for social media marketing."

EMOJI_ON_INSTRUCTION = (
    "Include relevant emojis naturally throughout the caption to enhance readability and engagement. "
    "Don't overdo it - use them strategically."
)
EMOJI_OFF_INSTRUCTION = "DO NOT include ANY emojis in the caption. Zero emojis."

CAPTION_SYSTEM_PROMPT = """You are an expert social media copywriter specializing in high-converting product captions for Facebook, Instagram, and e-commerce platforms.

Your captions must:
1. Be highly converting and attention-grabbing
2. Include product benefits and trust cues
3. Use proper formatting with line breaks for readability
4. End with a strong, clear call-to-action (CTA) like: "Order now", "Inbox now", "DM to buy", "Call now", "Limited stock - grab yours!", "Shop now", etc.
5. Be suitable for the Bangladeshi market context

LANGUAGE: {language_instruction}

EMOJI RULE: {emoji_instruction}

TONE: {tone_instruction}

LENGTH: {length_instruction}

{variation_instruction}"""


def build_caption_system_prompt(
    *,
    language: str,
    with_emojis: bool,
    caption_length: str,
    tone_style: str,
    generate_variations: bool,
) -> str:
    if generate_variations:
        variation_instruction = (
            f"Generate 2 DIFFERENT versions of the caption. Separate them with '{CAPTION_SEPARATOR}'. "
            "Each version should have a different approach while following all the same rules."
        )
    else:
        variation_instruction = "Generate 1 caption only."

    return CAPTION_SYSTEM_PROMPT.format(
        language_instruction=BANGLA_INSTRUCTION if language == "bangla" else ENGLISH_INSTRUCTION,
        emoji_instruction=EMOJI_ON_INSTRUCTION if with_emojis else EMOJI_OFF_INSTRUCTION,
        tone_instruction=TONE_DESCRIPTIONS.get(tone_style, TONE_DESCRIPTIONS["bold_salesy"]),
        length_instruction=LENGTH_INSTRUCTIONS.get(caption_length, LENGTH_INSTRUCTIONS["medium"]),
        variation_instruction=variation_instruction,
    )


def build_caption_user_text(
    *,
    description: str | None,
    language: str,
    with_emojis: bool,
    caption_length: str,
) -> str:
    if description:
        product_desc = f"\n\nProduct Details provided by seller:\n{description}"
    else:
        product_desc = "\n\n(No description provided - analyze the product from the image)"
    language_name = "Bengali" if language == "bangla" else "English"
    emoji_reminder = "Use emojis naturally" if with_emojis else "NO EMOJIS AT ALL"
    return (
        f"Create a {caption_length} {language_name} product caption for this product.{product_desc}"
        f"\n\nRemember: {emoji_reminder}. End with a compelling CTA."
    )


def split_captions(text: str, generate_variations: bool) -> list[str]:
    """Split a variations response on the separator; stray separators are stripped."""
    if generate_variations and CAPTION_SEPARATOR in text:
        parts = [part.strip() for part in text.split(CAPTION_SEPARATOR)]
        captions = [part for part in parts if part]
    else:
        captions = [text.strip()]
    return [caption.replace(CAPTION_SEPARATOR, "").strip() for caption in captions]
