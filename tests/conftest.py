import pytest

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00" + b"\x00" * 32 + b"\xff\xd9"
GIF_BYTES = b"GIF89a\x01\x00\x01\x00\x80\x00\x00\x00\x00\x00\xff\xff\xff!\xf9\x04\x01\x00\x00\x00\x00,\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"


@pytest.fixture
def jpeg_file(tmp_path):
    path = tmp_path / "picture.jpg"
    path.write_bytes(JPEG_BYTES)
    return path


@pytest.fixture
def gif_file(tmp_path):
    path = tmp_path / "picture.gif"
    path.write_bytes(GIF_BYTES)
    return path


@pytest.fixture
def text_file(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("plain notes without any signature\n")
    return path


@pytest.fixture
def jpeg_upload(jpeg_file):
    return {
        "tmp_name": str(jpeg_file),
        "name": jpeg_file.name,
        "size": len(JPEG_BYTES),
        "error": 0,
        "type": "image/jpeg",
    }
