import logging

from bh_studio.agent.artifacts import (
    CaptionRequest,
    CaptionResponse,
    DetailedPromptResponse,
    ExtractedPromptResponse,
    ExtractImagePromptRequest,
    GeneratePromptRequest,
    RefinedPromptResponse,
    RefinePromptRequest,
)
from bh_studio.agent.base import BaseAgent
from bh_studio.agent.errors import PAYMENT_REQUIRED_MESSAGE, NoOutputError, ToolInputError
from bh_studio.agent.llm_client import ContentPart, image_part, text_part
from bh_studio.agent.prompts.captions import (
    build_caption_system_prompt,
    build_caption_user_text,
    split_captions,
)
from bh_studio.agent.prompts.prompt_tools import (
    DETAILED_PROMPT_SYSTEM_PROMPT,
    IMAGE_PROMPT_EXTRACTION_PROMPT,
    REFINE_PROMPT_SYSTEM_PROMPT,
)

logger = logging.getLogger(__name__)


class CaptionAgent(BaseAgent[CaptionRequest, CaptionResponse]):
    """
    Writes social media captions for a product photo and/or seller description,
    in Bengali or English, optionally as two variations.
    """

    async def run(self, input_data: CaptionRequest) -> CaptionResponse:
        if not input_data.product_image and not input_data.description:
            raise ToolInputError("Please provide a product image or description")

        logger.info(
            "Caption generation request: language=%s emojis=%s length=%s tone=%s variations=%s",
            input_data.language,
            input_data.with_emojis,
            input_data.caption_length,
            input_data.tone_style,
            input_data.generate_variations,
        )

        system_prompt = build_caption_system_prompt(
            language=input_data.language,
            with_emojis=input_data.with_emojis,
            caption_length=input_data.caption_length,
            tone_style=input_data.tone_style,
            generate_variations=input_data.generate_variations,
        )

        user_content: list[ContentPart] = []
        if input_data.product_image:
            user_content.append(image_part(input_data.product_image))
        user_content.append(
            text_part(
                build_caption_user_text(
                    description=input_data.description,
                    language=input_data.language,
                    with_emojis=input_data.with_emojis,
                    caption_length=input_data.caption_length,
                )
            )
        )

        caption_text = await self.llm.generate_text(
            system_prompt,
            user_content,
            failure_message="Failed to generate caption",
            credits_message="API credits exhausted. Please try again later.",
        )
        if not caption_text:
            raise NoOutputError("No caption generated from AI")

        logger.info("Caption generated successfully")
        return CaptionResponse(captions=split_captions(caption_text, input_data.generate_variations))


class ImagePromptExtractorAgent(BaseAgent[ExtractImagePromptRequest, ExtractedPromptResponse]):
    """Describes an uploaded image as a generator-ready prompt."""

    async def run(self, input_data: ExtractImagePromptRequest) -> ExtractedPromptResponse:
        if not input_data.image:
            raise ToolInputError("No image provided")

        logger.info("Analyzing image for prompt extraction...")
        prompt = await self.llm.generate_text(
            None,
            [text_part(IMAGE_PROMPT_EXTRACTION_PROMPT), image_part(input_data.image)],
            failure_message="Failed to analyze image",
        )
        if not prompt:
            raise NoOutputError("No prompt generated")
        return ExtractedPromptResponse(prompt=prompt)


class DetailedPromptAgent(BaseAgent[GeneratePromptRequest, DetailedPromptResponse]):
    async def run(self, input_data: GeneratePromptRequest) -> DetailedPromptResponse:
        if not input_data.basic_prompt:
            raise ToolInputError("No prompt provided")

        logger.info("Generating ultra-detailed prompt for: %s", input_data.basic_prompt)
        detailed_prompt = await self.llm.generate_text(
            DETAILED_PROMPT_SYSTEM_PROMPT,
            "Transform this basic prompt into an ultra-detailed, photorealistic image generation prompt:"
            f'\n\n"{input_data.basic_prompt}"',
            failure_message="Failed to generate prompt",
            rate_limit_message="Rate limits exceeded. Please try again later.",
            credits_message=PAYMENT_REQUIRED_MESSAGE,
        )
        if not detailed_prompt:
            raise NoOutputError("No prompt generated from AI")
        return DetailedPromptResponse(detailed_prompt=detailed_prompt)


class RefinePromptAgent(BaseAgent[RefinePromptRequest, RefinedPromptResponse]):
    """Rewrites a prompt for character-consistent generation, always appending the identity lock."""

    async def run(self, input_data: RefinePromptRequest) -> RefinedPromptResponse:
        if not input_data.prompt or not input_data.prompt.strip():
            raise ToolInputError("Please write a prompt to refine.")

        refined = await self.llm.generate_text(
            REFINE_PROMPT_SYSTEM_PROMPT,
            f"Refine this prompt for character-consistent image generation:\n\n{input_data.prompt}",
            failure_message="Failed to refine prompt",
            rate_limit_message="Rate limits exceeded, please try again later.",
            credits_message="Service temporarily unavailable, please try again later.",
        )
        refined = (refined or "").strip()
        if not refined:
            raise NoOutputError("No refined prompt returned")
        return RefinedPromptResponse(refined_prompt=refined)
