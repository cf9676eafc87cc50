import logging
from typing import ClassVar, Generic, TypeVar

from bh_studio.agent.artifacts import (
    ApplyBrandingRequest,
    ApplyMakeupRequest,
    BackgroundResponse,
    CharacterImageRequest,
    CinematicResponse,
    CinematicTransformRequest,
    DressChangeRequest,
    EnhancedPhotoResponse,
    EnhancePhotoRequest,
    EnhanceSkinRequest,
    ExtractDressRequest,
    FaceSwapRequest,
    FullLookTransferRequest,
    GenerateBackgroundRequest,
    GeneratedImageResponse,
    InfluencerImageRequest,
    LogoConcept,
    LogoRequest,
    LogoResponse,
    PoseTransferRequest,
    RemovePeopleRequest,
    StudioModel,
)
from bh_studio.agent.base import BaseAgent
from bh_studio.agent.errors import (
    PAYMENT_REQUIRED_MESSAGE,
    ContentBlockedError,
    CreditsExhaustedError,
    GatewayError,
    NoOutputError,
    RateLimitError,
    ToolInputError,
    UnchangedImageError,
)
from bh_studio.agent.generation_log import GenerationLogger
from bh_studio.agent.llm_client import ContentPart, ImageCompletion, image_part, text_part
from bh_studio.agent.prompts.backgrounds import BACKGROUND_SYSTEM_PROMPT, build_background_prompt
from bh_studio.agent.prompts.branding import build_branding_prompt
from bh_studio.agent.prompts.character import (
    CHARACTER_SCENE_TEMPLATE,
    build_influencer_prompt,
    build_influencer_shot,
)
from bh_studio.agent.prompts.cinematic import (
    CINEMATIC_BACKGROUNDS,
    CINEMATIC_PRESETS,
    Look,
    build_cinematic_prompt,
)
from bh_studio.agent.prompts.image_editing import (
    CAMERA_ANGLE_INSTRUCTIONS,
    DRESS_CHANGE_PROMPT,
    DRESS_EXTRACTION_PROMPT,
    FACE_SWAP_PROMPT,
    FULL_LOOK_TRANSFER_PROMPT,
    MAKEUP_PROMPT_TEMPLATE,
    MAKEUP_STYLES,
    PEOPLE_REMOVAL_PROMPT,
    POSE_TRANSFER_PROMPT,
    SKIN_ENHANCEMENT_PROMPT,
)
from bh_studio.agent.prompts.logo import VARIATION_SUFFIX, build_logo_prompt, concept_label
from bh_studio.agent.prompts.photo_studio import build_photo_studio_prompt

logger = logging.getLogger(__name__)

RequestType = TypeVar("RequestType", bound=StudioModel)

CONTENT_FILTER_MESSAGE = "No image was generated. The AI may have blocked the request due to content filters."

MIN_INFLUENCER_REFERENCES = 8

SAFETY_FINISH_REASONS = {"IMAGE_SAFETY", "SAFETY"}


def require(value: str | None, message: str) -> str:
    if not value or not value.strip():
        raise ToolInputError(message)
    return value


class ImageTool(BaseAgent[RequestType, GeneratedImageResponse], Generic[RequestType]):
    """
    Shared flow for the image editing tools: validate the request, build the
    instruction + image parts, ask the gateway for one image, optionally log it.
    Nothing reaches the gateway unless `validate` passes.
    """

    model_setting = "MODEL_IMAGE_EDIT"
    feature_key: ClassVar[str] = ""
    feature_name: ClassVar[str] = ""
    failure_message: ClassVar[str] = "Failed to process image with AI"
    rate_limit_message: ClassVar[str | None] = None
    credits_message: ClassVar[str | None] = None
    no_output_message: ClassVar[str] = CONTENT_FILTER_MESSAGE
    unchanged_message: ClassVar[str] = "The model returned the reference image unchanged."

    def __init__(self, model_name: str | None = None, generation_logger: GenerationLogger | None = None):
        super().__init__(model_name=model_name)
        self.generation_logger = generation_logger

    def validate(self, request: RequestType) -> None:
        """Raise ToolInputError for missing fields."""

    def build_content(self, request: RequestType) -> str | list[ContentPart]:
        raise NotImplementedError

    def system_prompt(self, request: RequestType) -> str | None:
        return None

    def reference_image(self, request: RequestType) -> str | None:
        """An output identical to this image is treated as a failed edit."""
        return None

    def check_completion(self, completion: ImageCompletion) -> None:
        """Raise when the gateway returned no usable image."""
        if not completion.image_url:
            raise NoOutputError(self.no_output_message)

    async def log_result(self, request: RequestType, image_url: str) -> None:
        """Hook for tools that upload their inputs/outputs and write an audit row."""

    async def generate_completion(self, request: RequestType) -> ImageCompletion:
        self.validate(request)
        logger.info("Processing %s request...", self.feature_key)

        completion = await self.llm.generate_image_completion(
            self.build_content(request),
            system_prompt=self.system_prompt(request),
            failure_message=self.failure_message,
            rate_limit_message=self.rate_limit_message,
            credits_message=self.credits_message,
        )
        self.check_completion(completion)

        reference = self.reference_image(request)
        if reference and completion.image_url == reference:
            logger.error("Model returned reference image unchanged for %s", self.feature_key)
            raise UnchangedImageError(self.unchanged_message)

        await self.log_result(request, completion.image_url)
        return completion

    async def generate(self, request: RequestType) -> str:
        completion = await self.generate_completion(request)
        return completion.image_url

    async def run(self, input_data: RequestType) -> GeneratedImageResponse:
        image_url = await self.generate(input_data)
        return GeneratedImageResponse(generated_image_url=image_url)


class DressChangeAgent(ImageTool[DressChangeRequest]):
    feature_key = "dress-change"
    feature_name = "Dress Change Studio"
    no_output_message = "Could not generate the dress change. Please try with a clearer photo."

    def validate(self, request: DressChangeRequest) -> None:
        require(request.user_image, "User image is required")
        require(request.dress_image_url, "Dress image is required")

    def build_content(self, request: DressChangeRequest) -> list[ContentPart]:
        logger.info("Dress change category: %s", request.category)
        return [
            text_part(DRESS_CHANGE_PROMPT),
            image_part(request.user_image),
            image_part(request.dress_image_url),
        ]

    async def log_result(self, request: DressChangeRequest, image_url: str) -> None:
        if not (request.user_id and self.generation_logger):
            return
        await self.generation_logger.arecord(
            user_id=request.user_id,
            feature_name=self.feature_name,
            prefix=self.feature_key,
            uploads=[request.user_image],
            passthrough_inputs=[request.dress_image_url],
            outputs=[image_url],
        )


class FaceSwapAgent(ImageTool[FaceSwapRequest]):
    model_setting = "MODEL_IMAGE_PRO"
    feature_key = "face-swap"
    feature_name = "Face Swap Studio"
    failure_message = "Failed to process face swap"
    unchanged_message = "Face swap failed. Please try a clearer face photo or different reference image."

    def validate(self, request: FaceSwapRequest) -> None:
        require(request.influencer_image, "Missing influencer image")
        require(request.reference_image, "Missing reference image")

    def build_content(self, request: FaceSwapRequest) -> list[ContentPart]:
        return [
            text_part(FACE_SWAP_PROMPT),
            text_part("IMAGE 1 (Influencer - use this face):"),
            image_part(request.influencer_image),
            text_part("IMAGE 2 (Reference - keep everything except the face):"),
            image_part(request.reference_image),
            text_part("Now generate the face-swapped result where IMAGE 2 has the face from IMAGE 1."),
        ]

    def reference_image(self, request: FaceSwapRequest) -> str | None:
        return request.reference_image


class PoseTransferAgent(ImageTool[PoseTransferRequest]):
    model_setting = "MODEL_IMAGE_PRO"
    feature_key = "pose-transfer"
    feature_name = "Pose Transfer Studio"
    failure_message = "Failed to process pose transfer"

    def validate(self, request: PoseTransferRequest) -> None:
        require(request.influencer_image, "Missing influencer image")
        require(request.pose_reference_image, "Missing pose reference image")

    def build_content(self, request: PoseTransferRequest) -> list[ContentPart]:
        return [
            text_part(POSE_TRANSFER_PROMPT),
            text_part("IMAGE 1 - INFLUENCER PHOTO (keep face, body, outfit, background from this):"),
            image_part(request.influencer_image),
            text_part("IMAGE 2 - POSE REFERENCE (use ONLY the pose/body position from this):"),
            image_part(request.pose_reference_image),
            text_part(
                "Now generate the influencer from Image 1 in the exact pose from Image 2. "
                "Keep everything from Image 1 except apply the pose from Image 2."
            ),
        ]


class FullLookTransferAgent(ImageTool[FullLookTransferRequest]):
    model_setting = "MODEL_IMAGE_FAST"
    feature_key = "full-look-transfer"
    feature_name = "Full Look Transfer"
    failure_message = "Failed to process full look transfer"
    unchanged_message = (
        "The model returned the reference image unchanged. "
        "Please try a clearer face photo or a different reference look."
    )

    def validate(self, request: FullLookTransferRequest) -> None:
        require(request.influencer_face_image, "Missing influencer face image")
        require(request.reference_look_image, "Missing reference look image")

    def build_content(self, request: FullLookTransferRequest) -> list[ContentPart]:
        return [
            text_part(FULL_LOOK_TRANSFER_PROMPT),
            text_part("IMAGE 1 (use ONLY this face/identity):"),
            image_part(request.influencer_face_image),
            text_part("IMAGE 2 (BASE image - keep everything except the face):"),
            image_part(request.reference_look_image),
            text_part(
                "Now output the edited IMAGE 2 with the face replaced by IMAGE 1 "
                "(everything else identical to IMAGE 2)."
            ),
        ]

    def reference_image(self, request: FullLookTransferRequest) -> str | None:
        return request.reference_look_image


class ApplyBrandingAgent(ImageTool[ApplyBrandingRequest]):
    feature_key = "apply-branding"
    feature_name = "Branding Studio"
    failure_message = "Failed to apply branding"
    no_output_message = "No branded image generated"

    def validate(self, request: ApplyBrandingRequest) -> None:
        if not request.post_image or not request.logo_image:
            raise ToolInputError("Post image and logo are required")

    def build_content(self, request: ApplyBrandingRequest) -> list[ContentPart]:
        logger.info("Branding settings: %s", request.settings.model_dump_json(by_alias=True))
        return [
            text_part(build_branding_prompt(request.settings)),
            image_part(request.post_image),
            image_part(request.logo_image),
        ]

    async def log_result(self, request: ApplyBrandingRequest, image_url: str) -> None:
        if not (request.user_id and self.generation_logger):
            return
        await self.generation_logger.arecord(
            user_id=request.user_id,
            feature_name=self.feature_name,
            prefix=self.feature_key,
            uploads=[request.post_image],
            outputs=[image_url],
        )


class EnhanceSkinAgent(ImageTool[EnhanceSkinRequest]):
    feature_key = "enhance-skin"
    feature_name = "Skin Enhancer"
    failure_message = "Failed to enhance skin texture"
    rate_limit_message = "Rate limits exceeded. Please try again later."
    credits_message = PAYMENT_REQUIRED_MESSAGE
    no_output_message = "No enhanced image returned from AI"

    def validate(self, request: EnhanceSkinRequest) -> None:
        require(request.image_url, "No image URL provided")

    def build_content(self, request: EnhanceSkinRequest) -> list[ContentPart]:
        return [text_part(SKIN_ENHANCEMENT_PROMPT), image_part(request.image_url)]


class ExtractDressAgent(ImageTool[ExtractDressRequest]):
    feature_key = "extract-dress-to-dummy"
    feature_name = "Dress Extractor"
    rate_limit_message = "Rate limit exceeded. Please try again later."
    credits_message = PAYMENT_REQUIRED_MESSAGE
    no_output_message = "AI could not extract the dress: No image generated"

    def validate(self, request: ExtractDressRequest) -> None:
        require(request.image, "No image provided")

    def build_content(self, request: ExtractDressRequest) -> list[ContentPart]:
        prompt = DRESS_EXTRACTION_PROMPT
        angle = CAMERA_ANGLE_INSTRUCTIONS.get(request.camera_angle or "")
        if angle:
            prompt = f"{prompt}\n\n{angle}"
        return [text_part(prompt), image_part(request.image)]


class ApplyMakeupAgent(ImageTool[ApplyMakeupRequest]):
    model_setting = "MODEL_IMAGE_PRO"
    feature_key = "apply-makeup"
    feature_name = "Makeup Studio"
    failure_message = "Failed to apply makeup"
    credits_message = "API credits depleted. Please add credits to continue."

    def validate(self, request: ApplyMakeupRequest) -> None:
        require(request.image, "Missing face image")
        if not request.makeup_style or request.makeup_style not in MAKEUP_STYLES:
            raise ToolInputError("Invalid or missing makeup style")

    def build_content(self, request: ApplyMakeupRequest) -> list[ContentPart]:
        prompt = MAKEUP_PROMPT_TEMPLATE.format(style_description=MAKEUP_STYLES[request.makeup_style])
        return [text_part(prompt), image_part(request.image)]


class GenerateBackgroundAgent(ImageTool[GenerateBackgroundRequest]):
    model_setting = "MODEL_IMAGE_PRO"
    feature_key = "generate-background"
    feature_name = "Background Creator"
    failure_message = "Failed to generate background"
    credits_message = "AI credits exhausted. Please add funds to continue."
    no_output_message = "No image generated"

    def build_content(self, request: GenerateBackgroundRequest) -> str:
        _, prompt = build_background_prompt(request.preset_id, request.custom_prompt)
        return prompt

    def system_prompt(self, request: GenerateBackgroundRequest) -> str | None:
        return BACKGROUND_SYSTEM_PROMPT

    async def run(self, input_data: GenerateBackgroundRequest) -> BackgroundResponse:
        preset_name, _ = build_background_prompt(input_data.preset_id, input_data.custom_prompt)
        image_url = await self.generate(input_data)
        return BackgroundResponse(generated_image_url=image_url, preset_name=preset_name)


class EnhancePhotoAgent(ImageTool[EnhancePhotoRequest]):
    """Re-lights and re-stages a photo while locking the subject; the model also writes a short creative brief."""

    model_setting = "MODEL_IMAGE_PRO"
    feature_key = "enhance-photo"
    feature_name = "Photography Studio"
    failure_message = "Failed to enhance photo"
    credits_message = "API credits exhausted. Please try again later."
    no_output_message = "No enhanced image generated from AI"

    def validate(self, request: EnhancePhotoRequest) -> None:
        require(request.image, "Please provide an image to enhance")

    def build_content(self, request: EnhancePhotoRequest) -> list[ContentPart]:
        logger.info(
            "Photo studio settings: type=%s style=%s background=%s quality=%s photographer=%s skin=%s/%s",
            request.photo_type,
            request.style_preset,
            request.background_option,
            request.output_quality,
            request.ai_photographer_mode,
            request.skin_finish_enabled,
            request.skin_finish_intensity,
        )
        prompt = build_photo_studio_prompt(
            photo_type=request.photo_type,
            style_preset=request.style_preset,
            background_option=request.background_option,
            output_quality=request.output_quality,
            ai_photographer_mode=request.ai_photographer_mode,
            skin_finish_enabled=request.skin_finish_enabled,
            skin_finish_intensity=request.skin_finish_intensity,
        )
        return [text_part(prompt), image_part(request.image)]

    async def log_result(self, request: EnhancePhotoRequest, image_url: str) -> None:
        if not (request.user_id and self.generation_logger):
            return
        await self.generation_logger.arecord(
            user_id=request.user_id,
            feature_name=self.feature_name,
            prefix=self.feature_key,
            uploads=[request.image],
            outputs=[image_url],
        )

    async def run(self, input_data: EnhancePhotoRequest) -> EnhancedPhotoResponse:
        completion = await self.generate_completion(input_data)
        return EnhancedPhotoResponse(
            generated_image_url=completion.image_url,
            creative_brief=(completion.text or "").strip(),
        )


class RemovePeopleAgent(ImageTool[RemovePeopleRequest]):
    model_setting = "MODEL_IMAGE_FAST"
    feature_key = "remove-people-from-image"
    feature_name = "Background Saver"
    rate_limit_message = "Rate limit exceeded. Please try again later."
    credits_message = PAYMENT_REQUIRED_MESSAGE

    def validate(self, request: RemovePeopleRequest) -> None:
        require(request.image, "No image provided")

    def build_content(self, request: RemovePeopleRequest) -> list[ContentPart]:
        return [text_part(PEOPLE_REMOVAL_PROMPT), image_part(request.image)]

    def check_completion(self, completion: ImageCompletion) -> None:
        if not completion.image_url:
            raise NoOutputError(f"AI could not process the image: {completion.text or 'No image generated'}")

    async def log_result(self, request: RemovePeopleRequest, image_url: str) -> None:
        if not (request.user_id and self.generation_logger):
            return
        await self.generation_logger.arecord(
            user_id=request.user_id,
            feature_name=self.feature_name,
            prefix="bg-saver",
            uploads=[request.image],
            outputs=[image_url],
        )


class CinematicTransformAgent(ImageTool[CinematicTransformRequest]):
    """
    Recreates a bridal portrait in a named pose/camera preset, on a background
    preset or a user-supplied backdrop, or both.
    """

    feature_key = "cinematic-transform"
    feature_name = "Cinematic Studio"
    failure_message = "Failed to transform image"
    credits_message = "API credits exhausted. Please contact support."
    no_output_message = "Failed to generate cinematic image"

    def validate(self, request: CinematicTransformRequest) -> None:
        require(request.image, "Image is required")
        if not (request.preset_id or request.background_id or request.custom_background_image):
            raise ToolInputError("Please select at least a cinematic style or a background option")
        if request.preset_id and request.preset_id not in CINEMATIC_PRESETS:
            raise ToolInputError("Invalid preset ID")

    @staticmethod
    def looks(request: CinematicTransformRequest) -> tuple[Look | None, Look | None]:
        preset = CINEMATIC_PRESETS.get(request.preset_id) if request.preset_id else None
        background = CINEMATIC_BACKGROUNDS.get(request.background_id) if request.background_id else None
        return preset, background

    def build_content(self, request: CinematicTransformRequest) -> list[ContentPart]:
        preset, background = self.looks(request)
        custom_background = bool(request.custom_background_image)
        prompt = build_cinematic_prompt(preset, background, custom_background)

        content = [text_part(prompt), image_part(request.image)]
        if custom_background:
            content.append(image_part(request.custom_background_image))
        return content

    async def run(self, input_data: CinematicTransformRequest) -> CinematicResponse:
        image_url = await self.generate(input_data)
        preset, background = self.looks(input_data)
        if input_data.custom_background_image:
            background_name = "Custom Background"
        else:
            background_name = background.name if background else "Original"
        return CinematicResponse(
            generated_image_url=image_url,
            preset_name=preset.name if preset else "None",
            background_name=background_name,
        )


class CharacterImageAgent(ImageTool[CharacterImageRequest]):
    model_setting = "MODEL_IMAGE_PRO"
    feature_key = "generate-character-image"
    feature_name = "Character Studio"
    failure_message = "Failed to generate image"
    rate_limit_message = "Rate limits exceeded. Please try again later."
    credits_message = PAYMENT_REQUIRED_MESSAGE
    no_output_message = "No image generated from AI"

    def validate(self, request: CharacterImageRequest) -> None:
        require(request.character_image, "No character reference image provided")
        require(request.prompt, "No prompt provided")

    def build_content(self, request: CharacterImageRequest) -> list[ContentPart]:
        logger.info("Generating character-consistent image for prompt: %s", request.prompt)
        return [
            text_part(CHARACTER_SCENE_TEMPLATE.format(scenario=request.prompt)),
            image_part(request.character_image),
        ]


class InfluencerImageAgent(ImageTool[InfluencerImageRequest]):
    """Generates a new photo of an influencer learned from a set of reference images."""

    model_setting = "MODEL_IMAGE_PRO"
    feature_key = "generate-influencer-image"
    feature_name = "AI Influencer Studio"
    failure_message = "Failed to generate image"
    credits_message = PAYMENT_REQUIRED_MESSAGE
    no_output_message = (
        "No image generated. This may be due to content policy restrictions or technical issues. "
        "Please try different settings."
    )

    def validate(self, request: InfluencerImageRequest) -> None:
        references = [image for image in request.reference_images if image]
        if len(references) < MIN_INFLUENCER_REFERENCES:
            raise ToolInputError(f"Please upload at least {MIN_INFLUENCER_REFERENCES} reference images for training")

    def build_content(self, request: InfluencerImageRequest) -> list[ContentPart]:
        shot = build_influencer_shot(request.angle, request.style, request.pose, request.dress, request.custom_prompt)
        logger.info("Influencer shot with %s reference images: %s", len(request.reference_images), shot)
        return [
            text_part(build_influencer_prompt(shot)),
            *(image_part(image) for image in request.reference_images if image),
        ]

    def check_completion(self, completion: ImageCompletion) -> None:
        if completion.finish_reason in SAFETY_FINISH_REASONS:
            logger.warning("Influencer image blocked by safety filters: %s", completion.finish_reason)
            raise ContentBlockedError(
                "Content policy restriction: The generated image was blocked by safety filters. "
                "Please try different settings or prompt."
            )
        if not completion.image_url:
            raise ContentBlockedError(self.no_output_message)


class GenerateLogoAgent(BaseAgent[LogoRequest, LogoResponse]):
    """
    Generates logo concepts from a text-only brand brief, one gateway call per
    variation. A failed variation is skipped, except for rate-limit and credit
    errors, which stop the run.
    """

    model_setting = "MODEL_IMAGE_FAST"
    feature_name = "logo-generator"
    rate_limit_message = "Rate limit exceeded. Please try again later."
    credits_message = "API credits exhausted. Please contact support."

    def __init__(self, model_name: str | None = None, generation_logger: GenerationLogger | None = None):
        super().__init__(model_name=model_name)
        self.generation_logger = generation_logger

    async def run(self, input_data: LogoRequest) -> LogoResponse:
        require(input_data.brand_name, "Brand name is required")
        logger.info(
            "Processing logo generation request: brand=%s industry=%s lockup=%s variations=%s",
            input_data.brand_name,
            input_data.industry,
            input_data.lockup_type,
            input_data.num_variations,
        )
        prompt = build_logo_prompt(input_data)

        image_urls: list[str] = []
        for number in range(1, input_data.num_variations + 1):
            logger.info("Generating logo variation %s of %s...", number, input_data.num_variations)
            try:
                image_url = await self.llm.generate_image(
                    prompt + VARIATION_SUFFIX.format(number=number),
                    failure_message="Failed to generate logo",
                    rate_limit_message=self.rate_limit_message,
                    credits_message=self.credits_message,
                )
            except (RateLimitError, CreditsExhaustedError):
                raise
            except GatewayError as e:
                logger.error("Logo variation %s failed: %s", number, e.message)
                continue
            if not image_url:
                logger.error("No image returned for logo variation %s", number)
                continue
            image_urls.append(image_url)

        if not image_urls:
            raise NoOutputError("Failed to generate any logo variations")

        concepts = [LogoConcept(url=url, label=concept_label(index)) for index, url in enumerate(image_urls)]
        logger.info("Generated %s logo variations", len(concepts))

        if input_data.user_id and self.generation_logger:
            await self.generation_logger.asave_logo_generation(
                user_id=input_data.user_id,
                brand_name=input_data.brand_name,
                inputs=input_data.model_dump(mode="json", by_alias=True),
                concepts=[concept.model_dump() for concept in concepts],
                feature_name=self.feature_name,
            )
        return LogoResponse(images=concepts)
