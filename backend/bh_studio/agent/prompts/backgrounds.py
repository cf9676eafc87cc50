BACKGROUND_PRESETS: dict[str, dict[str, str]] = {
    "luxury-neutral": {
        "name": "Luxury Neutral Studio",
        "prompt": "Ultra-realistic luxury bridal studio background. Soft beige and ivory walls with subtle plaster texture. Elegant minimal molding details. Natural depth with soft falloff. Warm studio lighting creating gentle shadows. No props, no furniture, no decorations. Clean empty space. 8K photorealistic quality.",
    },
    "royal-mughal": {
        "name": "Royal Mughal Interior",
        "prompt": "Ultra-realistic Mughal heritage interior background. Muted elegant arches with warm sandstone tones. Tasteful symmetry with subtle carved details. Soft heritage lighting. No heavy decorations, no props, no furniture. Understated royal elegance. 8K photorealistic quality.",
    },
    "floral-studio": {
        "name": "Floral Studio Wall",
        "prompt": "Ultra-realistic studio background with soft pastel floral wall. Blurred depth with elegant understated flower arrangements. Soft pink, cream and sage tones. No props, clean composition. 8K photorealistic quality.",
    },
    "modern-bridal": {
        "name": "Modern Bridal Studio",
        "prompt": "Ultra-realistic modern luxury bridal studio background. Minimalist wall panels in warm neutral palette. Editorial vibe with clean lines. Soft studio lighting. No props, no furniture. 8K photorealistic quality.",
    },
    "white-gold": {
        "name": "Classic White & Gold Studio",
        "prompt": "Ultra-realistic classic bridal studio background. Clean white walls with very subtle faint gold trim accents. Soft warm lighting. No props, no decorations. Simple and refined. 8K photorealistic quality.",
    },
    "draped-fabric": {
        "name": "Soft Draped Fabric Background",
        "prompt": "Ultra-realistic studio background with sheer draped fabric layers. Gentle flowing folds in cream and champagne tones. Studio-lit realism with soft shadows. No props. 8K photorealistic quality.",
    },
    "dark-luxury": {
        "name": "Dark Luxury Editorial",
        "prompt": "Ultra-realistic dark luxury editorial background. Deep charcoal or muted emerald tones. Soft gradients with cinematic depth. No props, clean composition. 8K photorealistic quality.",
    },
    "palace-wall": {
        "name": "Palace-Inspired Soft Wall",
        "prompt": "Ultra-realistic palace-inspired background. Textured stone and plaster look with heritage luxury feel. Warm cream and sand tones. No props, no furniture. 8K photorealistic quality.",
    },
    "window-light": {
        "name": "Window Light Studio",
        "prompt": "Ultra-realistic studio background with large diffused window light impression. Soft daylight look with gentle shadows. Warm neutral walls. No visible window frame. 8K photorealistic quality.",
    },
    "makeup-studio": {
        "name": "Premium Makeup Studio Interior",
        "prompt": "Ultra-realistic premium makeup studio interior background. Clean luxury interior with neutral warm tones. Professional depth with subtle background blur. Soft studio lighting. No props in foreground. 8K photorealistic quality.",
    },
}

DEFAULT_BACKGROUND_PROMPT = (
    "Ultra-realistic neutral luxury bridal studio background. Soft warm beige walls with subtle texture. "
    "Elegant depth with soft falloff. Premium photography backdrop for South Asian bridal portraits. "
    "Soft studio lighting. No props, no decorations. Clean and sophisticated. 8K photorealistic quality."
)

BACKGROUND_SYSTEM_PROMPT = """You are an elite background-generation engine specialized in high-end South Asian bridal, fashion, and studio photography.

Your ONLY task is to generate photorealistic, premium backgrounds that:
- Look like real physical studio sets
- Never look AI-generated
- Never overpower the subject
- Are suitable for bridal portraits, editorial shoots, and luxury makeup studios

HARD CONSTRAINTS (DO NOT BREAK):
- Do NOT generate people, faces, hands, bodies
- Do NOT include text, logos, signage, frames, props that touch the subject
- Do NOT create busy, distracting, or over-decorated scenes
- Do NOT use fantasy, surreal, cartoon, or painterly styles

OUTPUT: Generate ONLY the background image. No people, no subjects, just the empty background ready for composite use."""


def build_background_prompt(preset_id: str | None, custom_prompt: str | None) -> tuple[str, str]:
    """Return (preset name, generation prompt) for a preset, a custom description, or both."""
    custom = (custom_prompt or "").strip()
    preset = BACKGROUND_PRESETS.get(preset_id or "")

    if preset:
        if not custom:
            return preset["name"], preset["prompt"]
        return preset["name"], (
            f"{preset['prompt']}\n\n"
            "Additional requirements from user (incorporate elegantly while maintaining bridal luxury aesthetic):\n"
            f"{custom}"
        )

    if custom:
        return "Custom Background", (
            "Generate ultra-realistic luxury bridal studio background based on this description:\n"
            f"{custom}\n\n"
            "Requirements:\n"
            "- Must be photorealistic, look like a real physical studio set\n"
            "- Suitable for South Asian bridal portraits\n"
            "- No people, no faces, no bodies - just the empty background\n"
            "- Warm neutral tones, soft studio lighting\n"
            "- Clean, elegant, not busy or distracting\n"
            "- 8K quality"
        )

    return "Default Luxury Studio", DEFAULT_BACKGROUND_PROMPT
