from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class StudioModel(BaseModel):
    """Request/response payloads use camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Image editing requests.
# Required images are optional at the schema level; each tool reports
# its own missing-field message before anything is sent to the gateway.

class DressChangeRequest(StudioModel):
    user_image: str | None = None
    dress_image_url: str | None = None
    category: str | None = None
    user_id: str | None = None


class FaceSwapRequest(StudioModel):
    influencer_image: str | None = None
    reference_image: str | None = None
    user_id: str | None = None


class PoseTransferRequest(StudioModel):
    influencer_image: str | None = None
    pose_reference_image: str | None = None
    user_id: str | None = None


class FullLookTransferRequest(StudioModel):
    influencer_face_image: str | None = None
    reference_look_image: str | None = None
    user_id: str | None = None


class BrandingSettings(StudioModel):
    position: Literal["top-left", "top-right", "bottom-left", "bottom-right"] = "bottom-right"
    transparency: int = Field(default=100, ge=0, le=100)
    logo_size: int = Field(default=15, ge=1, le=100)
    safe_margin: bool = True
    logo_style: Literal["clean", "watermark", "badge"] = "clean"
    brand_border: bool = False
    cta_preset: str = "none"
    cta_custom_text: str = ""
    repeat_watermark: bool = False
    social_handle: str = ""


class ApplyBrandingRequest(StudioModel):
    post_image: str | None = None
    logo_image: str | None = None
    settings: BrandingSettings = Field(default_factory=BrandingSettings)
    user_id: str | None = None


class EnhanceSkinRequest(StudioModel):
    image_url: str | None = None
    user_id: str | None = None


class ExtractDressRequest(StudioModel):
    image: str | None = None
    camera_angle: str | None = None
    user_id: str | None = None


class ApplyMakeupRequest(StudioModel):
    image: str | None = None
    makeup_style: str | None = None
    user_id: str | None = None


class GenerateBackgroundRequest(StudioModel):
    preset_id: str | None = None
    custom_prompt: str | None = None
    user_id: str | None = None


class EnhancePhotoRequest(StudioModel):
    image: str | None = None
    photo_type: Literal["product", "portrait", "lifestyle"] = "portrait"
    style_preset: str = "clean_studio"
    background_option: str = "keep_original"
    output_quality: Literal["hd", "ultra_hd"] = "hd"
    ai_photographer_mode: bool = False
    skin_finish_enabled: bool = False
    skin_finish_intensity: Literal["light", "medium", "pro"] | None = None
    user_id: str | None = None


class RemovePeopleRequest(StudioModel):
    image: str | None = None
    user_id: str | None = None


class CinematicTransformRequest(StudioModel):
    image: str | None = None
    preset_id: str | None = None
    background_id: str | None = None
    custom_background_image: str | None = None
    user_id: str | None = None


class CharacterImageRequest(StudioModel):
    character_image: str | None = None
    prompt: str | None = None
    user_id: str | None = None


class InfluencerImageRequest(StudioModel):
    reference_images: list[str] = Field(default_factory=list)
    angle: str | None = None
    style: str | None = None
    pose: str | None = None
    dress: str | None = None
    custom_prompt: str | None = None
    user_id: str | None = None


class LogoRequest(StudioModel):
    brand_name: str | None = None
    industry: str = ""
    target_customer: str = ""
    brand_personality: list[str] = Field(default_factory=list)
    core_brand_feeling: str = ""
    background_use: str = "both"
    color_palette: str = ""
    symbol_preference: str = ""
    typography_direction: list[str] = Field(default_factory=list)
    symbol_meaning_focus: list[str] = Field(default_factory=list)
    cultural_scope: str = ""
    lockup_type: Literal["wordmark", "symbol-wordmark", "monogram"] = "symbol-wordmark"
    complexity_level: Literal["minimal", "balanced", "detailed"] = "balanced"
    num_variations: int = Field(default=1, ge=1, le=4)
    background_mode: str = "transparent"
    text_strictness: str = "exact"
    tagline: str = ""
    user_id: str | None = None


class GeneratedImageResponse(StudioModel):
    generated_image_url: str


class BackgroundResponse(GeneratedImageResponse):
    preset_name: str


class EnhancedPhotoResponse(GeneratedImageResponse):
    creative_brief: str = ""


class CinematicResponse(GeneratedImageResponse):
    preset_name: str
    background_name: str


class LogoConcept(StudioModel):
    url: str
    label: str


class LogoResponse(StudioModel):
    success: bool = True
    images: list[LogoConcept]



# Text tools

class CaptionRequest(StudioModel):
    product_image: str | None = None
    description: str | None = None
    language: Literal["bangla", "english"] = "english"
    with_emojis: bool = True
    caption_length: Literal["short", "medium", "long"] = "medium"
    tone_style: str = "bold_salesy"
    generate_variations: bool = False


class CaptionResponse(StudioModel):
    captions: list[str]


class ExtractImagePromptRequest(StudioModel):
    image: str | None = None


class ExtractedPromptResponse(StudioModel):
    prompt: str


class GeneratePromptRequest(StudioModel):
    basic_prompt: str | None = None


class DetailedPromptResponse(StudioModel):
    detailed_prompt: str


class RefinePromptRequest(StudioModel):
    prompt: str | None = None


class RefinedPromptResponse(StudioModel):
    refined_prompt: str


# Prompt engineer pipeline

class PromptEngineerRequest(StudioModel):
    prompt: str | None = None
    prompt_type: str = "general"

    @field_validator("prompt", mode="before")
    @classmethod
    def non_string_prompt_is_missing(cls, value: Any) -> Any:
        # The pipeline reports a non-text prompt the same way as an empty one.
        return value if isinstance(value, str) else None


class AgentOutput(StudioModel):
    id: str
    name: str
    output: str


class PromptEngineerResponse(StudioModel):
    """Artifact produced by the five-stage prompt refinement pipeline."""
    success: bool = True
    original_prompt: str
    prompt_type: str
    agents: list[AgentOutput]
    final_prompt: str


# Video

class ImageToVideoRequest(StudioModel):
    image: str | None = None
    preset: str | None = None
    custom_prompt: str | None = None
    user_id: str | None = None


class VideoResponse(StudioModel):
    video_url: str


class ErrorResponse(StudioModel):
    error: str
