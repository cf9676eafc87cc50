BACKGROUND_INSTRUCTIONS = {
    "transparent": "on a pure transparent background",
    "dark": "on a solid dark charcoal or black background",
    "light": "on a clean white or off-white background",
}
DEFAULT_BACKGROUND_INSTRUCTION = "on a minimal neutral background"

LOCKUP_DESCRIPTIONS = {
    "wordmark": "wordmark-only logo focusing on premium typography of the brand name",
    "symbol-wordmark": "logo with a distinctive symbol/icon alongside the brand name wordmark",
    "monogram": "monogram logo using the initials in an elegant, interlocking design",
}

COMPLEXITY_DESCRIPTIONS = {
    "minimal": "ultra-minimal, clean lines, maximum negative space",
    "balanced": "balanced detail, refined but not sparse",
    "detailed": "intricate but still luxurious, fine details that reward close viewing",
}

LOGO_STYLE_CONSTRAINTS = """MANDATORY STYLE CONSTRAINTS:
- Luxury brand identity logo, premium vector-style mark
- Sharp edges, high clarity, crisp lines
- Balanced letter spacing, professional kerning
- Centered composition with harmonious proportions
- High contrast, timeless elegance
- The brand name "{brand_name}" must be spelled exactly correctly
- Agency-quality, editorial-grade design
- Suitable for luxury fashion, premium tech, or high-end service brands

STRICTLY AVOID:
- No mockups, no business cards, no signage
- No 3D render, no embossing, no metallic texture simulation
- No watermarks, no random text, no spelling errors
- No busy backgrounds, no illustrations, no mascots
- No generic crowns, laurels, or lions
- No gradients unless specifically part of the requested color palette
- No trendy overused symbols"""

VARIATION_SUFFIX = "\n\nThis is variation {number} - make it unique while maintaining the brand guidelines."


def concept_label(index: int) -> str:
    """Concept A, Concept B, ..."""
    return f"Concept {chr(ord('A') + index)}"


def build_logo_prompt(request) -> str:
    """Brand brief for one logo request; `request` is a LogoRequest."""
    context_lines = [
        f"- Industry: {request.industry}",
        f"- Target Customer: {request.target_customer}",
        f"- Brand Personality: {' and '.join(request.brand_personality)}",
        f"- Core Brand Feeling: {request.core_brand_feeling}",
        f"- Cultural Scope: {request.cultural_scope}",
    ]
    if request.symbol_meaning_focus:
        context_lines.append(f"- Symbol Should Convey: {', '.join(request.symbol_meaning_focus)}")
    if request.tagline and request.text_strictness == "with-tagline":
        context_lines.append(f'- Tagline: "{request.tagline}"')

    if request.background_use == "both":
        designed_for = "both dark and light backgrounds"
    else:
        designed_for = f"{request.background_use} backgrounds"

    visual_lines = [
        f"- Logo Type: {LOCKUP_DESCRIPTIONS[request.lockup_type]}",
        f"- Typography Style: {' or '.join(request.typography_direction)}",
        f"- Color Palette: {request.color_palette}",
        f"- Complexity: {COMPLEXITY_DESCRIPTIONS[request.complexity_level]}",
        f"- Background: {BACKGROUND_INSTRUCTIONS.get(request.background_mode, DEFAULT_BACKGROUND_INSTRUCTION)}",
        f"- Designed for use on: {designed_for}",
    ]

    return "\n".join(
        [
            f'Create a luxury brand identity logo for "{request.brand_name}" exactly as spelled.',
            "",
            "BRAND CONTEXT:",
            *context_lines,
            "",
            "VISUAL REQUIREMENTS:",
            *visual_lines,
            "",
            LOGO_STYLE_CONSTRAINTS.format(brand_name=request.brand_name),
        ]
    )
