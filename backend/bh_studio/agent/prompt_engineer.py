import logging

from pydantic import BaseModel

from bh_studio.agent.artifacts import AgentOutput, PromptEngineerRequest, PromptEngineerResponse
from bh_studio.agent.base import BaseAgent
from bh_studio.agent.errors import GatewayError, ToolInputError
from bh_studio.agent.prompts.prompt_engineer import (
    ALIGNMENT_PROMPT,
    CONTEXTUALIZER_PROMPT,
    DETAILER_PROMPT,
    FINAL_OUTPUT_PROMPT,
    POLISHER_PROMPT,
    prompt_type_context,
)
from bh_studio.core.config import settings

logger = logging.getLogger(__name__)


class PipelineStage(BaseModel):
    id: str
    name: str
    template: str

    def system_prompt(self, prompt_type: str, original_prompt: str) -> str:
        return self.template.format(
            context=prompt_type_context(prompt_type),
            original_prompt=original_prompt,
        )


PIPELINE_STAGES: tuple[PipelineStage, ...] = (
    PipelineStage(id="detailer", name="Detailer", template=DETAILER_PROMPT),
    PipelineStage(id="contextualizer", name="Contextualizer", template=CONTEXTUALIZER_PROMPT),
    PipelineStage(id="alignment", name="Alignment Check", template=ALIGNMENT_PROMPT),
    PipelineStage(id="polisher", name="Polisher", template=POLISHER_PROMPT),
    PipelineStage(id="final", name="Final Output", template=FINAL_OUTPUT_PROMPT),
)


class PromptEngineerAgent(BaseAgent[PromptEngineerRequest, PromptEngineerResponse]):
    """
    Runs the five refinement stages strictly in order. Each stage receives the
    previous stage's output as its user message; a stage that returns nothing
    passes its input through unchanged. Any stage failure aborts the whole run.
    """

    model_setting = "MODEL_PROMPT_ENGINEER"

    async def run_stage(self, stage: PipelineStage, input_prompt: str, prompt_type: str, original_prompt: str) -> str:
        logger.info("Running agent: %s", stage.name)
        try:
            output = await self.llm.generate_text(
                stage.system_prompt(prompt_type, original_prompt),
                input_prompt,
                max_tokens=settings.PROMPT_ENGINEER_MAX_TOKENS,
                failure_message=f"Agent {stage.name} failed",
            )
        except GatewayError as e:
            logger.error("Agent %s error: %s", stage.name, e.message)
            raise
        return output or input_prompt

    async def run(self, input_data: PromptEngineerRequest) -> PromptEngineerResponse:
        prompt = input_data.prompt
        if not prompt or not isinstance(prompt, str) or not prompt.strip():
            raise ToolInputError("Please provide a prompt to refine")

        original_prompt = prompt.strip()
        prompt_type = input_data.prompt_type or "general"

        agent_results: list[AgentOutput] = []
        current_prompt = original_prompt
        for stage in PIPELINE_STAGES:
            current_prompt = await self.run_stage(stage, current_prompt, prompt_type, original_prompt)
            agent_results.append(AgentOutput(id=stage.id, name=stage.name, output=current_prompt))

        return PromptEngineerResponse(
            success=True,
            original_prompt=original_prompt,
            prompt_type=prompt_type,
            agents=agent_results,
            final_prompt=current_prompt,
        )
