CHARACTER_SCENE_TEMPLATE = """YOU ARE A CHARACTER-CONSISTENT IMAGE GENERATOR. YOUR ONLY JOB IS TO CREATE A NEW IMAGE WITH THE EXACT SAME CHARACTER.

ABSOLUTE CHARACTER CONSISTENCY REQUIREMENTS:
ANALYZE THIS CHARACTER AND MEMORIZE EVERY DETAIL:
- Face shape, structure, and proportions (MUST BE IDENTICAL)
- Eye shape, color, size, spacing, and expression (MUST BE IDENTICAL)
- Nose shape, size, and bridge (MUST BE IDENTICAL)
- Mouth, lips shape, size, and natural expression (MUST BE IDENTICAL)
- Skin tone, texture, and any distinctive marks (MUST BE IDENTICAL)
- Hair color, style, texture, and length (MUST BE IDENTICAL)
- Body type, build, proportions, and posture (MUST BE IDENTICAL)
- Age appearance and overall facial features (MUST BE IDENTICAL)
- Any distinctive features like freckles, moles, scars, dimples (MUST BE IDENTICAL)

YOUR TASK:
Create a new photorealistic image where this EXACT character is placed in the following scenario:
"{scenario}"

CRITICAL RULES:
- The character's face, body, and all physical features MUST remain 100% identical to the reference
- Only change: the scenario, environment, clothing, pose, and context
- Maintain the same person's identity completely
- Generate a high-quality, photorealistic image (8K quality)
- Use professional photography lighting and composition
- Make it look like the same person photographed in a different situation

NEVER change:
- Face shape, facial features, or proportions
- Eye shape, color, or characteristics
- Skin tone or complexion
- Body type or build
- The person's core identity and appearance

Think: "Same person, same face, same body - just in a new scenario."

Generate a photorealistic, ultra-high-quality image maintaining absolute character consistency."""

INFLUENCER_PHOTOGRAPHER_PROMPT = """You are a professional AI photographer specializing in creating consistent influencer photoshoots.

CRITICAL RULES FOR CHARACTER CONSISTENCY:
1. The user has provided multiple reference images of the SAME influencer
2. You MUST analyze ALL reference images to learn the influencer's:
   - Exact face shape, facial features, eye shape, nose, lips, jawline, cheekbones
   - Precise skin tone, complexion, and natural skin texture
   - Body proportions, height, build, posture
   - Overall identity and likeness
3. Every generated image MUST show the EXACT SAME PERSON from the references
4. Treat this like a real photoshoot - the person remains identical, only the setting/pose/angle changes
5. NO face morphing, NO feature changes, NO body alterations
6. The influencer's identity is LOCKED and CANNOT change

GENERATION REQUIREMENTS:
- Photorealistic, high-resolution output (suitable for social media)
- Professional photography quality with proper lighting and composition
- Natural skin texture with realistic detail
- Consistent identity across all generations
- No distortions, warping, or inconsistencies

Generate the image following the user's specified angle, style, pose, and scene requirements while maintaining 100% influencer consistency."""

INFLUENCER_ANGLES = {
    "front": "Front-facing angle, looking directly at camera, symmetrical composition",
    "45-degree": "45-degree angle, three-quarter view showing face and partial profile",
    "side-profile": "Side profile angle, showing complete profile of face from the side",
    "close-up": "Close-up portrait, focusing on face and upper shoulders, intimate framing",
    "full-body-standing": "Full-body standing shot, head to toe, complete figure visible",
    "sitting": "Sitting pose angle, comfortable seated position, natural posture",
    "over-shoulder": "Over-the-shoulder angle, looking back at camera with partial face visible",
    "walking": "Walking pose angle, captured mid-stride with natural movement",
}

INFLUENCER_STYLES = {
    "studio": (
        "Professional studio lighting with soft diffused light, clean white or grey backdrop, "
        "professional photography setup"
    ),
    "natural-light": "Natural daylight lighting, soft ambient light from windows, bright and airy atmosphere",
    "outdoor": "Outdoor natural setting with environmental lighting, authentic location photography",
    "fashion": "High-fashion editorial style with dramatic lighting, elegant and sophisticated mood",
    "home": "Home aesthetic with cozy interior lighting, warm and comfortable atmosphere",
    "cinematic": "Cinematic mood lighting with dramatic shadows and highlights, film-like quality",
    "selfie": "Selfie-style angle from slightly above, casual and personal perspective",
}

INFLUENCER_POSES = {
    "standing": "Standing naturally with relaxed posture, arms at sides or slightly bent",
    "leaning": "Leaning casually against a wall or surface, relaxed confident pose",
    "sitting": "Sitting comfortably with natural leg positioning, relaxed seated posture",
    "walking": "Walking naturally with one foot forward, captured in motion",
    "hands-on-waist": "Hands placed on waist or hips, confident assertive stance",
    "arms-crossed": "Arms crossed over chest, powerful confident pose",
    "looking-back": "Looking back over shoulder at camera, elegant turned pose",
}

KEEP_REFERENCE_DRESS = "Keep the same clothing/dress from the reference images"

DEFAULT_INFLUENCER_SHOT = "Professional influencer photoshoot"


def build_influencer_shot(
    angle: str | None,
    style: str | None,
    pose: str | None,
    dress: str | None,
    custom_prompt: str | None,
) -> str:
    """Join the known angle/style/pose details, the dress choice and any custom text."""
    parts = [
        detail
        for detail in (
            INFLUENCER_ANGLES.get(angle or ""),
            INFLUENCER_STYLES.get(style or ""),
            INFLUENCER_POSES.get(pose or ""),
        )
        if detail
    ]
    if dress == "keep-reference":
        parts.append(KEEP_REFERENCE_DRESS)
    if custom_prompt:
        parts.append(custom_prompt)
    return ". ".join(parts) or DEFAULT_INFLUENCER_SHOT


def build_influencer_prompt(shot: str) -> str:
    return (
        f"{INFLUENCER_PHOTOGRAPHER_PROMPT}\n\n"
        f"Generate a professional influencer photo with these specifications: {shot}\n\n"
        "IMPORTANT: Maintain EXACT consistency with the influencer shown in ALL reference images below."
    )
