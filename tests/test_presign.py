from dataclasses import replace
from unittest.mock import MagicMock

PRESIGNED_URL = "https://print-bucket.s3.amazonaws.com/uploads/1_part.stl?X-Amz-Signature=abc123"


def test_presign_returns_signed_url(s3_app_client, s3_client):
    response = s3_app_client.get("/api/presign", params={"key": "uploads/1_part.stl"})

    assert response.status_code == 200
    assert response.json() == {"url": PRESIGNED_URL}
    s3_client.generate_presigned_url.assert_called_once_with(
        "get_object",
        Params={"Bucket": "print-bucket", "Key": "uploads/1_part.stl"},
        ExpiresIn=60,
    )


def test_presign_without_key_is_rejected(s3_app_client, s3_client):
    response = s3_app_client.get("/api/presign")

    assert response.status_code == 400
    assert response.json() == {"error": "Missing key"}
    s3_client.generate_presigned_url.assert_not_called()


def test_presign_with_empty_key_is_rejected(s3_app_client):
    response = s3_app_client.get("/api/presign?key=")

    assert response.status_code == 400
    assert response.json() == {"error": "Missing key"}


def test_presign_failure_is_generic_server_error(s3_app_client, s3_client):
    s3_client.generate_presigned_url.side_effect = RuntimeError("signature mismatch")

    response = s3_app_client.get("/api/presign", params={"key": "uploads/1_part.stl"})

    assert response.status_code == 500
    assert response.json() == {"error": "Unable to presign"}


def test_presign_expiry_is_configurable(make_client, s3_settings):
    client = MagicMock()
    client.generate_presigned_url.return_value = "https://signed"
    app_client = make_client(replace(s3_settings, PRESIGN_EXPIRES=900), s3_client=client)

    app_client.get("/api/presign", params={"key": "uploads/2_part.stl"})

    assert client.generate_presigned_url.call_args.kwargs["ExpiresIn"] == 900


def test_presign_is_absent_in_disk_mode(client):
    response = client.get("/api/presign", params={"key": "uploads/1_part.stl"})

    assert response.status_code == 404
