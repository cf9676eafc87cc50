import base64
from unittest.mock import MagicMock

import pytest

from bh_studio.agent.generation_log import GenerationLogger, decode_image_payload

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"
DATA_URL = "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode()
PUBLIC_URL = "https://project.supabase.co/storage/v1/object/public/generation-images/user-1/x.png"


def make_logger(client=None):
    client = client or MagicMock()
    client.storage.from_.return_value.get_public_url.return_value = PUBLIC_URL
    return GenerationLogger(client, bucket="generation-images", clock=lambda: 1700000000.5)


def test_decode_image_payload_accepts_data_url_and_bare_base64():
    assert decode_image_payload(DATA_URL) == PNG_BYTES
    assert decode_image_payload(base64.b64encode(PNG_BYTES).decode()) == PNG_BYTES


def test_upload_image_stores_png_under_user_folder():
    generation_logger = make_logger()
    client = generation_logger.client

    url = generation_logger.upload_image(DATA_URL, "user-1", "dress-change-input")

    assert url == PUBLIC_URL
    client.storage.from_.assert_called_with("generation-images")
    bucket = client.storage.from_.return_value
    bucket.upload.assert_called_once_with(
        "user-1/dress-change-input-1700000000500.png",
        PNG_BYTES,
        file_options={"content-type": "image/png", "upsert": "false"},
    )


def test_upload_image_passes_remote_urls_through():
    generation_logger = make_logger()

    assert generation_logger.upload_image("https://cdn.example.com/a.png", "user-1", "x") == "https://cdn.example.com/a.png"
    generation_logger.client.storage.from_.assert_not_called()


def test_upload_failure_returns_none():
    generation_logger = make_logger()
    generation_logger.client.storage.from_.return_value.upload.side_effect = RuntimeError("bucket missing")

    assert generation_logger.upload_image(DATA_URL, "user-1", "x") is None


def test_log_generation_filters_blank_urls():
    generation_logger = make_logger()

    assert generation_logger.log_generation("user-1", "Branding Studio", [PUBLIC_URL, None, " "], [PUBLIC_URL])

    generation_logger.client.rpc.assert_called_once_with(
        "log_generation",
        {
            "p_user_id": "user-1",
            "p_feature_name": "Branding Studio",
            "p_input_images": [PUBLIC_URL],
            "p_output_images": [PUBLIC_URL],
        },
    )


def test_log_generation_without_user_is_skipped():
    generation_logger = make_logger()

    assert generation_logger.log_generation(None, "Branding Studio") is False
    generation_logger.client.rpc.assert_not_called()


def test_log_generation_never_raises():
    generation_logger = make_logger()
    generation_logger.client.rpc.return_value.execute.side_effect = RuntimeError("db down")

    assert generation_logger.log_generation("user-1", "Branding Studio") is False


@pytest.mark.asyncio
async def test_arecord_uploads_inputs_and_outputs():
    generation_logger = make_logger()

    logged = await generation_logger.arecord(
        user_id="user-1",
        feature_name="Dress Change Studio",
        prefix="dress-change",
        uploads=[DATA_URL],
        passthrough_inputs=["https://cdn.example.com/dress.png"],
        outputs=[DATA_URL],
    )

    assert logged is True
    bucket = generation_logger.client.storage.from_.return_value
    uploaded_paths = [c.args[0] for c in bucket.upload.call_args_list]
    assert uploaded_paths == [
        "user-1/dress-change-input-1700000000500.png",
        "user-1/dress-change-output-1700000000500.png",
    ]
    params = generation_logger.client.rpc.call_args.args[1]
    assert params["p_input_images"] == [PUBLIC_URL, "https://cdn.example.com/dress.png"]
    assert params["p_output_images"] == [PUBLIC_URL]


@pytest.mark.asyncio
async def test_logo_generation_is_stored_and_logged():
    generation_logger = make_logger()
    concepts = [{"url": DATA_URL, "label": "Concept A"}]

    logged = await generation_logger.asave_logo_generation(
        user_id="user-1",
        brand_name="Noor",
        inputs={"brandName": "Noor"},
        concepts=concepts,
    )

    assert logged is True
    generation_logger.client.table.assert_called_once_with("logo_generations")
    row = generation_logger.client.table.return_value.insert.call_args.args[0]
    assert row["brand_name"] == "Noor"
    assert row["images_json"] == concepts
    assert row["status"] == "success"
    params = generation_logger.client.rpc.call_args.args[1]
    assert params["p_feature_name"] == "logo-generator"
    assert params["p_input_images"] == []
    assert params["p_output_images"] == [DATA_URL]


def test_failed_logo_insert_still_writes_audit_row():
    generation_logger = make_logger()
    generation_logger.client.table.return_value.insert.return_value.execute.side_effect = RuntimeError("db down")

    assert generation_logger.save_logo_generation(
        user_id="user-1", brand_name="Noor", inputs={}, concepts=[{"url": PUBLIC_URL, "label": "Concept A"}]
    )
    generation_logger.client.rpc.assert_called_once()
