from typing import NamedTuple


class Look(NamedTuple):
    name: str
    prompt: str


CINEMATIC_PRESETS: dict[str, Look] = {
    "over-shoulder": Look(
        "Over-the-Shoulder Grace",
        """CAMERA: Behind the subject, shooting from back at 45-degree angle.
BODY: Subject's BACK is facing camera. Body turned away. Head rotated to look OVER LEFT SHOULDER toward camera.
VISIBLE: Back of blouse, shoulder, profile of face, back of head, one side of face making eye contact.
FRAMING: Upper body from waist up, emphasis on back and shoulder line.
This is a BACK VIEW shot - the camera sees the subject from behind.""",
    ),
    "birds-eye": Look(
        "Bird's-Eye Bridal Symphony",
        """CAMERA: Directly overhead, 90-degrees above subject, shooting straight DOWN at the floor.
BODY: Subject lying flat on floor OR standing with face tilted UP toward ceiling/camera.
VISIBLE: Top of head, full lehenga spread in circular pattern on floor, arms extended outward.
FRAMING: Full body visible from directly above, lehenga creates circular/symmetrical pattern.
This is a TOP-DOWN AERIAL shot - camera is on ceiling looking down.""",
    ),
    "high-angle": Look(
        "High-Angle Royal Gaze",
        """CAMERA: Above eye level, angled 30-degrees downward toward subject.
BODY: Subject looking to the side (NOT at camera), chin slightly lowered.
VISIBLE: Top of head, forehead, full face from above, shoulders, upper chest, neckline jewellery prominent.
FRAMING: Head and shoulders, shot from above making subject look elegant and demure.
This is a HIGH ANGLE portrait - camera is higher than subject's eyes.""",
    ),
    "joy-closeup": Look(
        "Spontaneous Joy Close-Up",
        """CAMERA: Eye level, very close to face (macro portrait distance).
EXPRESSION: Genuine LAUGHING smile - teeth visible, eyes crinkled with joy, natural laugh.
VISIBLE: Only face fills the frame - eyes, nose, lips, cheeks. Ears and hair partially cropped.
FRAMING: EXTREME close-up, face fills 90% of frame, background completely blurred.
This is a TIGHT FACE CROP with joyful expression.""",
    ),
    "neckline": Look(
        "Neckline Elegance Detail",
        """CAMERA: Slightly below chin level, angled upward at neckline.
BODY: One hand raised to TOUCH the necklace/choker gently with fingertips.
VISIBLE: Chin, neck, collarbone, upper chest, choker/necklace, fingers touching jewellery, blouse neckline.
FRAMING: Neck and chest area fills frame, face cropped at lips or nose level. Hand in frame.
This is a NECKLINE DETAIL shot focusing on jewellery and hand.""",
    ),
    "eyes": Look(
        "Eyes of the Bride",
        """CAMERA: Exact eye level, close portrait distance.
EXPRESSION: Soft, gentle gaze directly at camera. Slight smile, mysterious look.
VISIBLE: ONLY from forehead to nose/upper lip. Eyes are the focal point. Eyebrows, nose bridge visible.
FRAMING: ULTRA TIGHT crop - only eyes and bridge of nose in sharp focus. Rest soft.
This is an EYES-ONLY portrait - the tightest possible face crop.""",
    ),
    "full-frame": Look(
        "Full-Frame Royal Stance",
        """CAMERA: At waist level, wide angle lens, 3-4 meters away from subject.
BODY: Full standing pose - feet visible, arms relaxed at sides or holding dupatta.
VISIBLE: Entire body head to toe - full lehenga, full dupatta, all jewellery, footwear, floor.
FRAMING: WIDE SHOT with full body centered, significant space above head and below feet.
This is a FULL BODY portrait - the widest possible framing showing everything.""",
    ),
    "window-light": Look(
        "Window-Light Serenity",
        """CAMERA: Side angle, 90-degrees to window light source.
LIGHTING: Strong directional light from ONE SIDE creating half-lit face (split lighting).
BODY: Face turned toward window, eyes closed or looking at window peacefully.
VISIBLE: Half face in light, half in shadow. Dramatic light/shadow contrast.
FRAMING: Head and shoulders, emphasis on dramatic one-sided lighting.
This is a SPLIT-LIT portrait with strong window light from the side.""",
    ),
    "candid-walk": Look(
        "Candid Side Walk",
        """CAMERA: Side angle, subject walking LEFT to RIGHT across frame.
BODY: Mid-stride walking pose - one foot forward, weight shifting, arms in natural walking motion.
VISIBLE: Full body in profile/side view. Dupatta flowing behind with movement.
FRAMING: Full or 3/4 body, motion blur in fabric, walking direction clear.
This is a WALKING ACTION shot captured from the side - shows movement.""",
    ),
    "floor-seated": Look(
        "Floor-Seated Royal Pose",
        """CAMERA: Slightly above subject (who is on floor), angled down.
BODY: SITTING on floor - legs folded or extended, lehenga spread around on floor.
VISIBLE: Subject seated on ground, lehenga fabric arranged on floor, hands in lap or on floor.
FRAMING: Full seated figure with lehenga spread visible on floor around subject.
This is a SEATED ON FLOOR pose - subject is sitting down, not standing.""",
    ),
    "jewellery-glow": Look(
        "Jewellery Glow Portrait",
        """CAMERA: Eye level, standard portrait distance.
LIGHTING: Enhance golden glow and reflections on ALL EXISTING jewellery pieces only.
BODY: Natural standing pose, same as input photo.
VISIBLE: Face and upper body with jewellery catching beautiful light reflections.
FRAMING: Head to chest, jewellery prominently lit.
CRITICAL: DO NOT add any new jewellery. Only enhance lighting on existing pieces. Same pose as input.""",
    ),
    "mirror": Look(
        "Mirror Reflection Elegance",
        """COMPOSITION: A decorative mirror is visible in the scene. Subject's REFLECTION appears in the mirror.
CAMERA: Angled to capture both the real subject AND their mirror reflection simultaneously.
VISIBLE: Part of subject's back/side + their face visible IN THE MIRROR reflection.
FRAMING: Artistic split composition - real subject on one side, mirror with reflection on other.
This requires adding a MIRROR element to the scene showing the subject's reflection.""",
    ),
}

CINEMATIC_BACKGROUNDS: dict[str, Look] = {
    "warm-neutral-luxury": Look(
        "Warm Neutral Luxury Wall",
        "Soft beige to warm ivory textured wall with subtle plaster finish. Minimal, elegant studio environment. "
        "Warm ambient lighting with gentle falloff. No patterns, no props, no decorations. Feels like a premium "
        "Gulshan makeup studio interior. Realistic shadows and depth.",
    ),
    "dark-mocha-editorial": Look(
        "Dark Mocha Editorial Studio",
        "Deep mocha brown studio wall with soft gradient lighting. Rich, editorial tone. Low-contrast cinematic "
        "lighting creating depth without overpowering the subject. High-end bridal photoshoot aesthetic used in "
        "luxury Dhaka studios.",
    ),
    "classic-off-white-panel": Look(
        "Classic Off-White Panel Room",
        "Elegant off-white wall with subtle rectangular panel detailing. Soft indoor lighting. Clean, timeless "
        "interior resembling upscale Gulshan apartments used for bridal shoots. Natural shadows, realistic "
        "perspective.",
    ),
    "window-light-corner": Look(
        "Window-Light Studio Corner",
        "Soft studio corner with a large window off-frame. Natural daylight entering from one side, creating "
        "gentle highlights and realistic shadows. Minimal interior, calm and airy. Looks like a real daylight "
        "bridal studio in Dhaka.",
    ),
    "luxury-fabric-backdrop": Look(
        "Luxury Fabric Backdrop",
        "Softly draped premium fabric backdrop in muted champagne or warm taupe tones. Natural folds, no symmetry. "
        "Subtle depth and shadow. Looks like a real cloth backdrop used by professional makeup studios, not a "
        "digital background.",
    ),
    "royal-burgundy-editorial": Look(
        "Royal Burgundy Editorial Wall",
        "Deep burgundy textured wall with cinematic lighting. Rich but controlled saturation. Editorial bridal "
        "photography vibe used for jewellery and lehenga campaigns. Soft shadow separation between subject and "
        "background.",
    ),
    "minimal-grey-studio": Look(
        "Minimal Grey Studio Interior",
        "Soft grey studio wall with smooth matte texture. Neutral, balanced lighting suitable for showcasing makeup "
        "and jewellery accurately. Clean, modern Dhaka makeup studio look. No props, no clutter.",
    ),
    "warm-indoor-apartment": Look(
        "Warm Indoor Apartment Lounge",
        "Upscale Dhaka apartment interior with soft warm lighting. Minimal furniture blurred in the distance. "
        "Feels like a real bridal shoot done in a Gulshan living room. Natural depth, realistic indoor ambience.",
    ),
    "soft-shadow-editorial": Look(
        "Soft Shadow Editorial Backdrop",
        "Neutral studio wall with gentle shadow gradients cast naturally behind the subject. Controlled cinematic "
        "lighting. Editorial fashion photography style. No visible light sources, no patterns.",
    ),
    "classic-dark-studio-fade": Look(
        "Classic Dark Studio Fade",
        "Dark studio background fading from charcoal to deep brown. Subtle vignette effect. High-end bridal "
        "editorial style commonly used in jewellery campaigns. Realistic contrast and depth.",
    ),
}

CINEMATIC_EDITOR_PROMPT = """You are a professional bridal photography editor. Your task is to transform the provided photo according to the instructions below.

LOCKED ELEMENTS (MUST NEVER CHANGE):
- Face identity: EXACT same person, same facial structure, same makeup style/shape, same skin tone.
- Jewellery: EXACT same jewellery pieces as the input. Same number of items, same design, same stones/metal style, same size, same placement.
  - DO NOT add new jewellery.
  - DO NOT remove jewellery.
  - DO NOT replace jewellery with different designs.
  - DO NOT "invent" extra chains, extra earrings, extra nose ring chains, extra bangles, extra headpieces, etc.
- Clothing/outfit: must remain the same outfit (same color, embroidery/patterns, fabric type). Do not introduce new clothing pieces.

QUALITY REQUIREMENTS:
- Photorealistic DSLR quality output
- Cinematic lighting appropriate to the scene
- Natural skin texture (no plastic look)
- No AI artifacts, no cut-out edges, no fake blur
- Seamless, natural result that looks like a real photograph"""

DUAL_TASK = """DUAL TASK - Apply BOTH transformations:
1. FIRST: Transform the pose/composition as described in the cinematic style
2. THEN: Place the transformed subject in the new background environment
Both transformations must be applied together in the final output."""

STYLE_ONLY_TASK = """SINGLE TASK - Cinematic Style Only:
Transform the pose/composition as described. Keep the original background."""

BACKGROUND_ONLY_TASK = """SINGLE TASK - Background Only:
Keep the exact same pose. Only replace the background as described."""

CINEMATIC_STYLE_TEMPLATE = """PRIMARY TASK - CINEMATIC POSE/COMPOSITION TRANSFORMATION:
You MUST recreate this exact person in the following new pose and composition:

"{name}": {prompt}

IMPORTANT: This is an image-to-image transformation. Take the person from the input image and recreate them in this new pose/angle/composition. The person's face, jewellery, and outfit should look exactly the same, but the pose, camera angle, and framing should match the description above."""

POSE_PRESERVATION = """POSE PRESERVATION:
Keep the exact same pose, angle, and composition as the original photo."""

CUSTOM_BACKGROUND_INSTRUCTIONS = """BACKGROUND REPLACEMENT INSTRUCTIONS:
You are provided with TWO images:
1. The subject image (bridal portrait)
2. A custom background image provided by the user

Your task: Extract the subject (the person) from the first image and seamlessly composite them onto the second image (the custom background).

Requirements:
- Keep the subject EXACTLY as they appear - same face, makeup, jewellery, clothing
- Place the subject naturally within the custom background
- Match the lighting of the background to the subject
- Create realistic shadows and depth
- Ensure seamless blending - the subject must look naturally photographed in this environment
- Maintain photorealistic DSLR quality"""

PRESET_BACKGROUND_TEMPLATE = """BACKGROUND REPLACEMENT INSTRUCTIONS:
Replace ONLY the background using the following description while keeping the subject completely unchanged:

{prompt}

Ensure realistic lighting integration, natural shadows, correct perspective, and seamless blending. The subject must look naturally photographed in the new environment."""

QUALITY_REMINDERS = """QUALITY REMINDERS:
- The person's face, makeup, and jewellery must look identical to the original
- The outfit should appear natural in the new pose (same clothing, natural drape for the pose)
- Photorealistic DSLR quality, no AI artifacts
- Output should look like a real professional photograph"""


def build_cinematic_prompt(preset: Look | None, background: Look | None, custom_background: bool) -> str:
    """A custom background image takes precedence over a background preset."""
    replaces_background = custom_background or background is not None

    if preset and replaces_background:
        task = DUAL_TASK
    elif preset:
        task = STYLE_ONLY_TASK
    elif replaces_background:
        task = BACKGROUND_ONLY_TASK
    else:
        task = ""

    style = CINEMATIC_STYLE_TEMPLATE.format(name=preset.name, prompt=preset.prompt) if preset else POSE_PRESERVATION

    if custom_background:
        background_section = CUSTOM_BACKGROUND_INSTRUCTIONS
    elif background:
        background_section = PRESET_BACKGROUND_TEMPLATE.format(prompt=background.prompt)
    else:
        background_section = ""

    sections = [CINEMATIC_EDITOR_PROMPT, task, style, background_section, QUALITY_REMINDERS]
    return "\n\n".join(section for section in sections if section)
