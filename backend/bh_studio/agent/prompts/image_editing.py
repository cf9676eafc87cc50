DRESS_CHANGE_PROMPT = """TASK: Virtual clothing swap. Replace the clothing on the person in Image 1 with the outfit shown in Image 2.

CRITICAL INSTRUCTIONS:
1. OUTPUT IMAGE MUST have the EXACT SAME orientation, rotation, and framing as Image 1 (the person photo). DO NOT rotate the image.
2. The person's face must remain COMPLETELY UNCHANGED - same features, expression, angle, and position.
3. The person's pose must remain COMPLETELY UNCHANGED - same body position, arm positions, hand positions.
4. The background must remain COMPLETELY UNCHANGED - same as Image 1.
5. ONLY replace the clothing/outfit with the design from Image 2.

STEP BY STEP:
- Start with Image 1 (person photo) as the base
- Keep everything from Image 1 except the clothing
- Replace only the visible clothing with the outfit design from Image 2
- Blend the new clothing naturally onto the person's body
- Maintain the same lighting and shadows

DO NOT:
- Rotate or flip the image
- Change facial features or expression
- Change body pose or hand positions
- Change the background
- Add or remove accessories not in the original

Generate a high-quality image showing the person from Image 1 wearing the outfit from Image 2, with identical orientation and framing as Image 1."""

FACE_SWAP_PROMPT = """You are a photorealistic face identity transfer specialist.

TASK: Transfer ONLY the facial identity (who the person is) from IMAGE 1 onto IMAGE 2, while keeping EVERYTHING else from IMAGE 2 completely unchanged.

WHAT TO TRANSFER FROM IMAGE 1 (influencer):
- Facial bone structure and shape
- Skin texture and complexion
- Eye color and shape
- Nose shape
- Lip shape
- Distinctive facial features that identify this person

WHAT MUST STAY EXACTLY THE SAME FROM IMAGE 2 (reference) - DO NOT CHANGE:
- Facial EXPRESSION (smile, serious, pout, etc.)
- Eye direction and gaze
- Mouth position (open, closed, smiling angle)
- Head tilt and angle
- Camera perspective and framing
- Lighting direction and intensity
- Makeup style and application
- Hair (color, style, accessories like maang tikka, jhumar)
- Jewelry (earrings, necklace, nose ring)
- Bindi/tikka placement
- Background (every pixel)
- Clothing/outfit
- Body pose
- Overall image quality and style (professional or not)

CRITICAL RULES:
1. The result must look like IMAGE 1's PERSON but with IMAGE 2's EXPRESSION and POSE
2. If IMAGE 2 has a serious expression, keep it serious - do NOT make it smile
3. If IMAGE 2 is looking left, keep looking left
4. Do NOT improve, enhance, or "fix" the image quality
5. Do NOT change the mood or feeling of the photo
6. The swapped face must blend naturally with the exact lighting from IMAGE 2

OUTPUT: Generate the face-swapped image."""

POSE_TRANSFER_PROMPT = """TASK: Generate a new image of the person from IMAGE 1 in the exact body pose from IMAGE 2.

STEP 1 - ANALYZE IMAGE 1 (Main Subject):
Memorize every detail: face, hair, skin tone, body shape, clothing, accessories, makeup, background, lighting.

STEP 2 - ANALYZE IMAGE 2 (Pose Reference):
Extract ONLY the body pose: how arms are positioned, how legs are positioned, body angle, head tilt, shoulder position, hand placement.

STEP 3 - GENERATE NEW IMAGE:
Create the person from IMAGE 1 with:
- SAME face (identical features, expression style)
- SAME body proportions and shape
- SAME clothing (exact outfit, colors, patterns, textures)
- SAME background (environment, colors, elements)
- SAME lighting style and mood
- SAME accessories, jewelry, makeup
- NEW pose matching IMAGE 2's body position

FORBIDDEN:
- Do NOT use face from IMAGE 2
- Do NOT use clothing from IMAGE 2
- Do NOT use background from IMAGE 2
- Do NOT blend or morph features
- Do NOT create ghosting or double limbs
- Do NOT change the person's identity

The output must look like a professional photograph of the same person who simply moved into a different pose."""

FULL_LOOK_TRANSFER_PROMPT = """You are an expert photo editor.

GOAL (FACE KEEP): Edit IMAGE 2 by replacing ONLY the face with the face/identity from IMAGE 1.

HARD RULES (must follow):
- IMAGE 2 is the BASE. Keep EVERYTHING from IMAGE 2 pixel-consistent:
  outfit/dress, jewelry, body shape, pose, background, lighting, color grading, camera framing, hair from IMAGE 2.
- Replace ONLY the face area (forehead/eyes/nose/mouth/cheeks/chin) with the identity from IMAGE 1.
- The final face must be 100% recognizable as IMAGE 1 (identity preservation).
- Match IMAGE 2 lighting on the inserted face (shadows/highlights/white balance) so it blends naturally.
- NO double face, NO ghosting, NO seams at jaw/neck.

CRITICAL VALIDATION:
- Do NOT return IMAGE 2 unchanged.
- If you cannot perform the face replacement, you must FAIL (do not output an unchanged image).

Output: generate the final edited image."""

SKIN_ENHANCEMENT_PROMPT = """CRITICAL INSTRUCTIONS - Enhance ONLY the skin texture layer across ALL VISIBLE SKIN in the entire image.

SKIN AREAS TO ENHANCE:
Apply realistic skin texture enhancement to EVERY visible skin area including:
- Face (forehead, cheeks, nose, chin, around eyes)
- Neck (front and sides)
- Chest and decolletage
- Shoulders and upper back (if visible)
- Arms (upper arms, forearms)
- Hands and fingers
- Any other exposed skin areas

LOCKED LAYERS (ABSOLUTELY DO NOT MODIFY):
- All makeup: eyeshadow, foundation, contour, blush, eyeliner, mascara, lipstick, lip gloss, highlighter
- Lip shape, position, openness, color, shine, and gloss - MUST remain pixel-identical
- Facial expression: MUST remain exactly the same
- Eyebrows, eyelashes, eye shape, iris color, pupil size
- Face shape, jawline, nose shape, cheekbones, and all facial proportions
- Hairstyle, hair color, hair texture
- Clothing, jewelry, accessories
- Background elements
- Lighting style, direction, and color mood

ONLY MODIFY: Skin surface texture on ALL visible skin areas.
Apply these texture enhancements to all exposed skin:
- Natural visible pores (more on nose/forehead, less on neck/chest)
- Micro-lines and fine wrinkles appropriate to each skin area
- Soft organic imperfections and natural asymmetry
- Realistic micro-shadows that follow skin contours
- Natural skin texture depth with matte finish (not glossy or plastic)
- Preserve natural skin undertones and subtle color variations
- Remove only artificial smoothing, blur, and plastic-looking surfaces

ABSOLUTE PROHIBITIONS:
- NO makeup removal or modification whatsoever
- NO color changes to lips, eyes, skin tone, or makeup
- NO facial expression changes
- NO facial feature reshaping
- NO whitening, brightening, or beautification filters
- NO alterations to clothing, hair, jewelry, or background
- NO smoothing or blur on non-skin areas

GOAL:
The result must look like the exact same person, same makeup, same expression, same lighting - but photographed with a high-end professional camera that captures real human skin texture across all visible skin areas instead of phone camera smoothing."""

DRESS_EXTRACTION_PROMPT = """You are an expert clothing extraction and mannequin placement AI. Your task is to:

1. DETECT AND ISOLATE: Carefully identify and extract ONLY the clothing/outfit from the person in the image
2. REMOVE COMPLETELY: Remove the person's body, face, hair, skin, and ALL accessories including:
   - Jewelry (necklaces, earrings, rings, bracelets, bangles, watches)
   - Belts, bags, purses, handbags
   - Scarves, shawls, stoles (unless part of the main outfit)
   - Hair accessories, headbands, clips
3. EXTRACT EXACT DRESS: Keep the clothing exactly as it appears with:
   - Same design, pattern, and style
   - Same colors and color combinations
   - Same fabric texture and material appearance
   - Same folds, draping, and structure
   - Same embellishments that are part of the clothing (embroidery, sequins on fabric)
4. PLACE ON NEUTRAL MANNEQUIN:
   - Use a simple, minimal, professional mannequin/dummy
   - No facial features, no hair, no skin details
   - Clean white or grey mannequin body
   - Position the dress naturally on the mannequin as it would appear in a catalog
5. BACKGROUND: Use a clean, professional studio background (light grey or white)
6. OUTPUT QUALITY: Generate a high-resolution, catalog-ready image

CRITICAL RULES:
- The dress must be a 1:1 copy of what the person was wearing
- Do NOT redesign, modify, or create a new style
- Do NOT include any body parts, face, or hair
- Do NOT include any jewelry or accessories
- Focus ONLY on the clothing item itself
- Make it look professional and e-commerce ready"""

CAMERA_ANGLE_INSTRUCTIONS = {
    "front": "CAMERA ANGLE: Position the mannequin facing directly forward. Front view, straight-on perspective.",
    "side": "CAMERA ANGLE: Position the mannequin in profile view. Side angle showing the dress from a 90-degree side perspective.",
    "three-quarter": "CAMERA ANGLE: Position the mannequin at a three-quarter angle (45 degrees). Show both the front and side of the dress.",
    "back": "CAMERA ANGLE: Position the mannequin facing away from camera. Back view showing the rear design of the dress.",
    "top-down": "CAMERA ANGLE: Use an elevated, top-down perspective. Camera positioned above looking down at the mannequin.",
}

MAKEUP_STYLES = {
    "soft-glam": """SOFT GLAM MAKEUP:
- Subtle, warm-toned contour on cheekbones and jawline
- Nude or soft pink lipstick with slight sheen
- Warm peachy or brown eyeshadow blended softly
- Natural-looking lashes with light mascara
- Light highlighter on cheekbones, nose bridge, and cupid's bow
- Overall warm, romantic, feminine aesthetic""",
    "bridal-glow": """BRIDAL GLOW MAKEUP:
- Dewy, luminous base with flawless coverage
- Soft pink or coral blush on cheeks
- Highlighted cheekbones with champagne shimmer
- Neutral champagne and rose gold eyeshadow
- Full, fluffy lashes (bridal style)
- Soft pink or nude-rose lips
- Elegant, timeless, radiant bridal look""",
    "bold-night-out": """BOLD NIGHT OUT MAKEUP:
- Dramatic smokey eyes with deep grays, blacks, or dark browns
- Sharp winged eyeliner (cat eye)
- Deep lipstick (burgundy, berry, or deep red)
- Strong contour and highlight
- Full dramatic lashes
- Intense, glamorous, evening look""",
    "clean-girl": """CLEAN GIRL LOOK MAKEUP:
- Minimal, barely-there base showing natural skin
- Glossy, plump lips (clear or nude gloss)
- Brushed-up natural brows
- Light mascara only
- Cream blush for a healthy flush
- Fresh, effortless, "no-makeup makeup" aesthetic""",
    "instagram-trendy": """TRENDY INSTAGRAM LOOK MAKEUP:
- Sharp, sculpted eyebrows (laminated brow effect)
- Vibrant or colorful eyeshadow (sunset, pink, or purple tones)
- Fox eye or soft wing liner
- Full fluffy lashes
- Nude or mauve lipstick with slight gloss
- Modern, social-media ready, trendy aesthetic""",
    "matte-professional": """MATTE PROFESSIONAL LOOK MAKEUP:
- Smooth, matte foundation finish
- Neutral brown and taupe eyeshadow
- Thin, precise eyeliner
- Matte nude or MLBB lipstick
- Soft matte blush
- Polished, office-appropriate, sophisticated look""",
    "classic-red-glam": """CLASSIC RED GLAM MAKEUP:
- Bold, classic red lipstick (matte or satin finish)
- Sharp cat eyeliner (vintage winged style)
- Neutral eyeshadow with focus on liner
- Defined arched brows
- Soft contour and rosy blush
- Timeless Hollywood glamour, vintage elegance""",
}

MAKEUP_PROMPT_TEMPLATE = """You are a professional makeup artist AI. Your task is to apply realistic, professional makeup to the person in this photo.

CRITICAL REQUIREMENTS - ABSOLUTE PRESERVATION:
You MUST keep these elements 100% IDENTICAL and UNCHANGED:
- The EXACT same face shape, jawline, nose, chin
- The EXACT same skin tone and natural skin texture (including pores, fine lines, natural imperfections)
- The EXACT same facial expression, eyes, eye shape, and eye color
- The EXACT same hair color, style, and position
- The EXACT same background, lighting conditions and outfit
- The EXACT same identity - this must look like the SAME person

WHAT TO ADD - MAKEUP APPLICATION:
{style_description}

MAKEUP APPLICATION RULES:
- Apply makeup that looks PROFESSIONALLY DONE by a makeup artist
- Makeup must blend naturally with the person's skin tone and match the existing lighting
- NO plastic or airbrushed skin effect
- NO face morphing, reshaping, skin smoothing or texture removal
- NO filter effects or cartoon-like appearance

OUTPUT:
Generate a HIGH-RESOLUTION image of the SAME person with the specified makeup professionally applied."""

PEOPLE_REMOVAL_PROMPT = """You are an expert AI image editor specializing in people removal and background preservation. Your task is to:

PRIMARY OBJECTIVE:
Remove ALL people (humans, persons) from this image completely while keeping the background 100% intact and natural.

CRITICAL REQUIREMENTS FOR PEOPLE REMOVAL:
1. DETECT ALL PEOPLE: Identify every person in the image, whether they are:
   - In the foreground, middle ground, or background
   - Fully visible, partially visible, or partially obscured
   - Adults, children, babies, or any human figures
   - Standing, sitting, lying down, or in any pose

2. COMPLETE REMOVAL: Remove people entirely including:
   - Their entire body, face, hair, and all body parts
   - All clothing, accessories, and items they're wearing or holding
   - Their shadows and reflections
   - Any part of them, no matter how small

3. INTELLIGENT INPAINTING: Fill in the areas where people were removed by:
   - Analyzing the surrounding background patterns, textures, and colors
   - Seamlessly extending the background into the empty areas
   - Maintaining perspective, lighting, and depth
   - Ensuring natural-looking transitions with no visible seams or patches
   - Preserving the original scene's atmosphere and mood

BACKGROUND PRESERVATION REQUIREMENTS:
- Keep ALL background elements EXACTLY as they are:
  - Buildings, walls, furniture, objects, plants, trees, nature
  - Floor patterns, ground textures, sky, clouds, water
  - Lighting conditions, shadows (except those cast by people), reflections
  - Colors, color gradients, and color temperature
  - Perspective, depth, and spatial relationships
  - Any animals, vehicles, or non-human objects
- Maintain ORIGINAL qualities:
  - Image resolution and sharpness
  - Color saturation and tone
  - Contrast and brightness levels
  - Texture details and fine elements
  - Original aspect ratio

ABSOLUTELY FORBIDDEN:
- DO NOT remove, modify, or alter ANY background objects or elements
- DO NOT change the lighting style, time of day, or mood
- DO NOT add new objects, people, or elements that weren't there
- DO NOT create unrealistic patches, blurs, or distortions
- DO NOT leave visible outlines, edges, or artifacts where people were
- DO NOT change colors, textures, or patterns of the background
- DO NOT warp, stretch, or distort the perspective

QUALITY STANDARDS:
- The final image must look like a completely natural photograph
- No one should be able to tell that people were removed
- The scene should look authentic, not AI-edited
- All inpainted areas must blend seamlessly with the original background
- High resolution and sharp details throughout
- Professional, realistic, and artifact-free output

Generate a clean, people-free version of this image where the background remains perfectly intact and the inpainted areas look completely natural."""
