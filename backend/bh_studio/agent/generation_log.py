import base64
import binascii
import logging
import time
from collections.abc import Callable, Sequence

from starlette.concurrency import run_in_threadpool
from supabase import Client

from bh_studio.core.config import settings

logger = logging.getLogger(__name__)


def decode_image_payload(data: str) -> bytes:
    """Decode a data URL (`data:image/png;base64,...`) or a bare base64 string."""
    content = data.split(",", 1)[1] if "," in data else data
    return base64.b64decode(content, validate=False)


def _valid_strings(values: Sequence[str | None]) -> list[str]:
    return [v for v in values if isinstance(v, str) and v.strip()]


class GenerationLogger:
    """
    Uploads tool inputs/outputs to object storage and writes the audit row
    through the `log_generation` stored procedure. Failures are logged and
    never propagate.
    """

    def __init__(
        self,
        client: Client,
        bucket: str | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self.client = client
        self.bucket = bucket or settings.GENERATION_IMAGES_BUCKET
        self.clock = clock

    def upload_image(self, data: str, user_id: str, prefix: str) -> str | None:
        if data.startswith(("http://", "https://")):
            return data

        file_name = f"{user_id}/{prefix}-{int(self.clock() * 1000)}.png"
        try:
            payload = decode_image_payload(data)
            bucket = self.client.storage.from_(self.bucket)
            bucket.upload(
                file_name,
                payload,
                file_options={"content-type": "image/png", "upsert": "false"},
            )
            return bucket.get_public_url(file_name)
        except (binascii.Error, ValueError) as e:
            logger.error("Could not decode image for %s: %s", file_name, e)
        except Exception as e:
            logger.error("Storage upload error for %s: %s", file_name, e)
        return None

    def log_generation(
        self,
        user_id: str | None,
        feature_name: str,
        input_images: Sequence[str | None] = (),
        output_images: Sequence[str | None] = (),
    ) -> bool:
        if not user_id:
            logger.warning("No user ID provided, skipping generation log for %s", feature_name)
            return False
        try:
            self.client.rpc(
                "log_generation",
                {
                    "p_user_id": user_id,
                    "p_feature_name": feature_name,
                    "p_input_images": _valid_strings(input_images),
                    "p_output_images": _valid_strings(output_images),
                },
            ).execute()
        except Exception as e:
            logger.error("Error logging generation for %s: %s", feature_name, e)
            return False
        logger.info("Logged %s generation", feature_name)
        return True

    def record(
        self,
        *,
        user_id: str,
        feature_name: str,
        prefix: str,
        uploads: Sequence[str] = (),
        passthrough_inputs: Sequence[str | None] = (),
        outputs: Sequence[str] = (),
    ) -> bool:
        """Upload inputs and outputs, then write one audit row."""
        input_urls = [self.upload_image(image, user_id, f"{prefix}-input") for image in uploads]
        output_urls = [self.upload_image(image, user_id, f"{prefix}-output") for image in outputs]
        return self.log_generation(
            user_id,
            feature_name,
            [*input_urls, *passthrough_inputs],
            output_urls,
        )

    async def arecord(self, **kwargs) -> bool:
        # The BaaS client is synchronous; keep it off the event loop.
        return await run_in_threadpool(lambda: self.record(**kwargs))

    def save_logo_generation(
        self,
        *,
        user_id: str,
        brand_name: str | None,
        inputs: dict,
        concepts: Sequence[dict],
        feature_name: str = "logo-generator",
    ) -> bool:
        """Store the logo concepts in `logo_generations`, then write the audit row."""
        try:
            self.client.table("logo_generations").insert(
                {
                    "user_id": user_id,
                    "brand_name": brand_name,
                    "inputs_json": inputs,
                    "images_json": list(concepts),
                    "status": "success",
                }
            ).execute()
        except Exception as e:
            logger.error("Failed to save logo generation for %s: %s", user_id, e)
        return self.log_generation(user_id, feature_name, [], [concept["url"] for concept in concepts])

    async def asave_logo_generation(self, **kwargs) -> bool:
        return await run_in_threadpool(lambda: self.save_logo_generation(**kwargs))
