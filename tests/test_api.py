"""
API 服务测试
"""

import sys
import os

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from fastapi.testclient import TestClient

from hanyutils import __version__
from hanyutils.api.server import app


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": __version__}

    def test_request_id_header(self, client):
        response = client.get("/health")
        assert len(response.headers["X-Request-ID"]) == 8
        assert response.headers["X-Response-Time"].endswith("ms")


class TestConvert:
    """POST /convert"""

    @pytest.mark.parametrize("direction,text,expected", [
        ("mark", "ni3hao3", "nǐhǎo"),
        ("number", "nǐhǎo", "ni3hao3"),
        ("pinyin_to_zhuyin", "ni3hao3", "ㄋㄧˇㄏㄠˇ"),
        ("zhuyin_to_marked", "ㄋㄧˇㄏㄠˇ", "nǐhǎo"),
        ("zhuyin_to_numbered", "ㄋㄧˇㄏㄠˇ", "ni3hao3"),
        ("hanzi_to_marked", "你好", "nǐhǎo"),
        ("hanzi_to_numbered", "你好", "ni3hao3"),
        ("hanzi_to_zhuyin", "你好", "ㄋㄧˇㄏㄠˇ"),
    ])
    def test_directions(self, client, direction, text, expected):
        response = client.post("/convert", json={"text": text, "direction": direction})
        assert response.status_code == 200
        data = response.json()
        assert data["result"] == expected
        assert data["text"] == text
        assert data["direction"] == direction

    def test_mode(self, client):
        response = client.post(
            "/convert",
            json={"text": "Ni3好hao3", "direction": "mark", "mode": "mixed"},
        )
        assert response.json()["result"] == "Nǐ好hǎo"

    def test_parse_failure(self, client):
        """解析失败返回 422 和剩余输入"""
        response = client.post(
            "/convert",
            json={"text": "ni3 hello", "direction": "mark", "mode": "exclusive"},
        )
        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "ParseFailure"
        assert data["remainder"] == "hello"

    def test_bad_direction(self, client):
        response = client.post("/convert", json={"text": "ni3", "direction": "sideways"})
        assert response.status_code == 422


class TestLookup:
    """GET /lookup/{char}"""

    def test_lookup(self, client):
        response = client.get("/lookup/好")
        assert response.status_code == 200
        data = response.json()
        assert data["pron"] == "hǎo"
        assert "hào" in data["alt"]
        assert data["pron_tw"] is None
        assert data["zhuyin"] == "ㄏㄠˇ"

    @pytest.mark.parametrize("char", ["嗯", "呣"])
    def test_nasal_reading(self, client, char):
        """m/n/ng 读音没有注音写法，查询仍然成功"""
        response = client.get(f"/lookup/{char}")
        assert response.status_code == 200
        data = response.json()
        assert data["char"] == char
        assert data["pron"]
        assert data["zhuyin"] is None

    def test_unknown(self, client):
        response = client.get("/lookup/x")
        assert response.status_code == 404
