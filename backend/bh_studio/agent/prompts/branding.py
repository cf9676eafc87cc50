from bh_studio.agent.artifacts import BrandingSettings

POSITION_LABELS = {
    "top-left": "top-left corner",
    "top-right": "top-right corner",
    "bottom-left": "bottom-left corner",
    "bottom-right": "bottom-right corner",
}

LOGO_STYLE_LABELS = {
    "clean": "direct overlay with no modifications",
    "watermark": "semi-transparent watermark style",
    "badge": "with a subtle background/badge behind it for better contrast",
}


def cta_text(settings: BrandingSettings) -> str | None:
    """Resolve the CTA sticker text: presets like 'order-now' render as 'ORDER NOW'."""
    if settings.cta_preset == "none":
        return None
    if settings.cta_preset == "custom":
        return settings.cta_custom_text.strip() or None
    return settings.cta_preset.replace("-", " ").upper()


def build_branding_prompt(settings: BrandingSettings) -> str:
    margin = "Yes, keep 2-3% padding from edges" if settings.safe_margin else "No, can touch edges"
    sections = [
        f"""Apply branding to this image following these EXACT specifications:

LOGO PLACEMENT:
- Place the logo in the {POSITION_LABELS[settings.position]}
- Logo opacity/transparency: {settings.transparency}%
- Logo size: {settings.logo_size}% of the image width
- Safe margin from edges: {margin}
- Logo style: {LOGO_STYLE_LABELS[settings.logo_style]}

CRITICAL RULES - YOU MUST FOLLOW:
1. DO NOT modify, redraw, or change the logo in ANY way
2. DO NOT change logo colors, fonts, shape, or proportions
3. DO NOT alter the original image content (faces, products, background)
4. Keep the logo sharp and clear
5. Ensure logo is visible against any background
6. If logo style is "badge", add only a subtle semi-transparent background behind the logo for contrast"""
    ]

    if settings.brand_border:
        sections.append(
            "BRAND BORDER: Add a thin, elegant premium border (gold/cream color, 1-2px) around the entire image."
        )

    cta = cta_text(settings)
    if cta:
        sections.append(
            f'CTA STICKER: Add a small, professional CTA badge/sticker saying "{cta}" - '
            "position it elegantly, don't cover the logo or main content."
        )

    if settings.repeat_watermark:
        sections.append(
            "WATERMARK PATTERN: In addition to the main logo, add a repeating diagonal pattern of the logo "
            "across the entire image at very low opacity (10-15%) to prevent content theft. "
            "The pattern should be subtle and not distract from the main content."
        )

    if settings.social_handle.strip():
        sections.append(
            f'SOCIAL HANDLE: Add a minimal strip at the very bottom of the image displaying "{settings.social_handle.strip()}" '
            "in a clean, readable font with a semi-transparent dark background."
        )

    sections.append("FINAL OUTPUT: Return only the branded image. Maintain original image quality and dimensions.")
    return "\n\n".join(sections)
