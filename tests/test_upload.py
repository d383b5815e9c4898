from dataclasses import replace
from pathlib import Path

TEST_BUCKET = "print-bucket"
TEST_REGION = "us-east-1"

STL_BYTES = b"solid part\nfacet normal 0 0 1\nendfacet\nendsolid part\n"


def test_disk_upload_returns_local_location(client):
    response = client.post("/api/upload", files={"model": ("part.stl", STL_BYTES, "application/octet-stream")})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["storage"] == "disk"
    assert body["originalName"] == "part.stl"
    assert body["fileUrl"].startswith("http://testserver/uploads/")
    assert body["fileUrl"].endswith(".stl")
    assert "s3Key" not in body

    stored = Path(body["filePath"])
    assert stored.is_absolute()
    assert stored.read_bytes() == STL_BYTES
    assert body["fileUrl"].endswith(stored.name)


def test_disk_upload_is_served_statically(client):
    body = client.post("/api/upload", files={"model": ("part.stl", STL_BYTES)}).json()

    served = client.get(body["fileUrl"])

    assert served.status_code == 200
    assert served.content == STL_BYTES


def test_upload_without_file_is_rejected(client):
    response = client.post("/api/upload", data={"note": "forgot the file"})

    assert response.status_code == 400
    assert response.json() == {"error": "No file uploaded"}


def test_upload_with_wrong_field_name_is_rejected(client):
    response = client.post("/api/upload", files={"file": ("part.stl", STL_BYTES)})

    assert response.status_code == 400
    assert response.json() == {"error": "No file uploaded"}


def test_upload_over_size_limit_is_rejected(make_client, disk_settings):
    small_client = make_client(replace(disk_settings, MAX_UPLOAD_BYTES=16))

    response = small_client.post("/api/upload", files={"model": ("part.stl", STL_BYTES)})

    assert response.status_code == 413
    assert response.json() == {"error": "File too large"}
    assert list(disk_settings.upload_dir.iterdir()) == []


def test_s3_upload_returns_object_location(s3_app_client, s3_client):
    response = s3_app_client.post("/api/upload", files={"model": ("part.stl", STL_BYTES, "model/stl")})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["storage"] == "s3"
    assert body["originalName"] == "part.stl"
    assert body["s3Key"].startswith("uploads/")
    assert body["s3Key"].endswith("_part.stl")
    assert body["fileUrl"] == f"https://{TEST_BUCKET}.s3.{TEST_REGION}.amazonaws.com/{body['s3Key']}"
    assert "filePath" not in body

    s3_client.put_object.assert_called_once()
    kwargs = s3_client.put_object.call_args.kwargs
    assert kwargs["Bucket"] == TEST_BUCKET
    assert kwargs["Key"] == body["s3Key"]
    assert kwargs["Body"] == STL_BYTES
    assert kwargs["ACL"] == "private"


def test_s3_upload_failure_is_generic_server_error(s3_app_client, s3_client):
    s3_client.put_object.side_effect = RuntimeError("AccessDenied: bucket policy")

    response = s3_app_client.post("/api/upload", files={"model": ("part.stl", STL_BYTES)})

    assert response.status_code == 500
    assert response.json() == {"error": "Upload failed"}
    assert "AccessDenied" not in response.text


def test_s3_mode_does_not_serve_local_uploads(s3_app_client):
    assert s3_app_client.get("/uploads/anything.stl").status_code == 404


def test_upload_exactly_at_size_limit_is_accepted(make_client, disk_settings):
    limit_client = make_client(replace(disk_settings, MAX_UPLOAD_BYTES=len(STL_BYTES)))

    response = limit_client.post("/api/upload", files={"model": ("part.stl", STL_BYTES)})

    assert response.status_code == 200
    assert Path(response.json()["filePath"]).read_bytes() == STL_BYTES


def test_upload_one_byte_over_size_limit_is_rejected(make_client, disk_settings):
    limit_client = make_client(replace(disk_settings, MAX_UPLOAD_BYTES=len(STL_BYTES) - 1))

    response = limit_client.post("/api/upload", files={"model": ("part.stl", STL_BYTES)})

    assert response.status_code == 413
    assert response.json() == {"error": "File too large"}
