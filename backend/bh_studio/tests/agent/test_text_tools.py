import pytest

from bh_studio.agent.artifacts import (
    CaptionRequest,
    ExtractImagePromptRequest,
    GeneratePromptRequest,
    RefinePromptRequest,
)
from bh_studio.agent.errors import CreditsExhaustedError, NoOutputError, RateLimitError, ToolInputError
from bh_studio.agent.prompts.captions import CAPTION_SEPARATOR, split_captions
from bh_studio.agent.prompts.prompt_tools import DETAILED_PROMPT_SYSTEM_PROMPT
from bh_studio.agent.text_tools import (
    CaptionAgent,
    DetailedPromptAgent,
    ImagePromptExtractorAgent,
    RefinePromptAgent,
)
from bh_studio.core.config import settings


def test_split_captions_on_separator():
    text = f"First caption\n{CAPTION_SEPARATOR}\nSecond caption\n{CAPTION_SEPARATOR}\n"

    assert split_captions(text, generate_variations=True) == ["First caption", "Second caption"]


def test_split_captions_single_when_variations_off():
    text = f"Only one {CAPTION_SEPARATOR} caption"

    assert split_captions(text, generate_variations=False) == ["Only one  caption"]


@pytest.mark.asyncio
async def test_caption_requires_image_or_description(mock_completions):
    with pytest.raises(ToolInputError) as exc_info:
        await CaptionAgent().run(CaptionRequest())

    assert exc_info.value.message == "Please provide a product image or description"
    mock_completions.create.assert_not_called()


@pytest.mark.asyncio
async def test_caption_variations_are_split(mock_completions, completion):
    mock_completions.create.return_value = completion(
        content=f"অফার চলছে! এখনই অর্ডার করুন\n{CAPTION_SEPARATOR}\nসীমিত স্টক, ইনবক্স করুন"
    )
    request = CaptionRequest.model_validate(
        {
            "productImage": "https://cdn.example.com/saree.png",
            "description": "Silk saree",
            "language": "bangla",
            "withEmojis": False,
            "generateVariations": True,
        }
    )

    result = await CaptionAgent().run(request)

    assert result.captions == ["অফার চলছে! এখনই অর্ডার করুন", "সীমিত স্টক, ইনবক্স করুন"]
    kwargs = mock_completions.create.call_args.kwargs
    assert kwargs["model"] == settings.MODEL_TEXT
    system_prompt = kwargs["messages"][0]["content"]
    assert "Bengali script" in system_prompt
    assert "Zero emojis" in system_prompt
    assert CAPTION_SEPARATOR in system_prompt
    user_content = kwargs["messages"][1]["content"]
    assert user_content[0]["type"] == "image_url"
    assert "Silk saree" in user_content[1]["text"]


@pytest.mark.asyncio
async def test_caption_without_image_sends_text_only(mock_completions, completion):
    mock_completions.create.return_value = completion(content="Shop now!")

    result = await CaptionAgent().run(CaptionRequest(description="Leather bag"))

    assert result.captions == ["Shop now!"]
    user_content = mock_completions.create.call_args.kwargs["messages"][1]["content"]
    assert [part["type"] for part in user_content] == ["text"]


@pytest.mark.asyncio
async def test_caption_empty_response(mock_completions, completion):
    mock_completions.create.return_value = completion(content="")

    with pytest.raises(NoOutputError) as exc_info:
        await CaptionAgent().run(CaptionRequest(description="Leather bag"))

    assert exc_info.value.message == "No caption generated from AI"


@pytest.mark.asyncio
async def test_extract_image_prompt_sends_single_user_message(mock_completions, completion):
    mock_completions.create.return_value = completion(content="A golden hour portrait, 85mm lens")

    result = await ImagePromptExtractorAgent().run(ExtractImagePromptRequest(image="data:image/png;base64,AAAA"))

    assert result.prompt == "A golden hour portrait, 85mm lens"
    messages = mock_completions.create.call_args.kwargs["messages"]
    assert len(messages) == 1
    assert [part["type"] for part in messages[0]["content"]] == ["text", "image_url"]


@pytest.mark.asyncio
async def test_extract_image_prompt_requires_image(mock_completions):
    with pytest.raises(ToolInputError) as exc_info:
        await ImagePromptExtractorAgent().run(ExtractImagePromptRequest())

    assert exc_info.value.message == "No image provided"


@pytest.mark.asyncio
async def test_generate_prompt(mock_completions, completion):
    mock_completions.create.return_value = completion(content="Ultra-detailed bride portrait")

    result = await DetailedPromptAgent().run(GeneratePromptRequest(basic_prompt="bride portrait"))

    assert result.model_dump(by_alias=True) == {"detailedPrompt": "Ultra-detailed bride portrait"}
    messages = mock_completions.create.call_args.kwargs["messages"]
    assert messages[0]["content"] == DETAILED_PROMPT_SYSTEM_PROMPT
    assert '"bride portrait"' in messages[1]["content"]


@pytest.mark.asyncio
async def test_refine_prompt_strips_output(mock_completions, completion):
    mock_completions.create.return_value = completion(content="  Refined prompt text \n")

    result = await RefinePromptAgent().run(RefinePromptRequest(prompt="woman in a garden"))

    assert result.refined_prompt == "Refined prompt text"


@pytest.mark.asyncio
async def test_refine_prompt_rejects_blank(mock_completions):
    with pytest.raises(ToolInputError) as exc_info:
        await RefinePromptAgent().run(RefinePromptRequest(prompt="   "))

    assert exc_info.value.message == "Please write a prompt to refine."
    mock_completions.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("request_data", [{}, {"basicPrompt": ""}])
async def test_generate_prompt_requires_basic_prompt(mock_completions, request_data):
    with pytest.raises(ToolInputError) as exc_info:
        await DetailedPromptAgent().run(GeneratePromptRequest.model_validate(request_data))

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "No prompt provided"
    mock_completions.create.assert_not_called()


@pytest.mark.asyncio
async def test_caption_credit_exhaustion_wording(mock_completions, status_error):
    mock_completions.create.side_effect = status_error(402)

    with pytest.raises(CreditsExhaustedError) as exc_info:
        await CaptionAgent().run(CaptionRequest(description="Silk saree"))

    assert exc_info.value.status_code == 402
    assert exc_info.value.message == "API credits exhausted. Please try again later."


@pytest.mark.asyncio
async def test_refine_prompt_rate_limit_wording(mock_completions, status_error):
    mock_completions.create.side_effect = status_error(429)

    with pytest.raises(RateLimitError) as exc_info:
        await RefinePromptAgent().run(RefinePromptRequest(prompt="a woman in a garden"))

    assert exc_info.value.message == "Rate limits exceeded, please try again later."
