"""
hanyutils FastAPI 服务

提供 RESTful API 接口
"""

import os
import time
import uuid
from contextlib import asynccontextmanager
from enum import Enum
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

import hanyutils
from hanyutils.engine import (
    HanyuError,
    ParseFailure,
    ReadMode,
    UnmappableSyllable,
    get_api_logger,
    lookup,
    pinyin_to_zhuyin,
)

# 初始化日志
logger = get_api_logger()


# ===== 请求/响应模型 =====

class Direction(str, Enum):
    """转换方向"""
    MARK = "mark"
    NUMBER = "number"
    PINYIN_TO_ZHUYIN = "pinyin_to_zhuyin"
    ZHUYIN_TO_MARKED = "zhuyin_to_marked"
    ZHUYIN_TO_NUMBERED = "zhuyin_to_numbered"
    HANZI_TO_MARKED = "hanzi_to_marked"
    HANZI_TO_NUMBERED = "hanzi_to_numbered"
    HANZI_TO_ZHUYIN = "hanzi_to_zhuyin"


class ConvertRequest(BaseModel):
    """转换请求"""
    text: str = Field(..., description="输入文本")
    direction: Direction = Field(..., description="转换方向")
    mode: Optional[ReadMode] = Field(None, description="解析模式，汉字输入时忽略")


class ConvertResponse(BaseModel):
    """转换响应"""
    text: str
    direction: Direction
    result: str


class LookupResponse(BaseModel):
    """汉字查询响应"""
    char: str
    pron: str
    pron_tw: Optional[str] = None
    alt: List[str]
    zhuyin: Optional[str] = None


class HealthResponse(BaseModel):
    """健康检查响应"""
    status: str
    version: str


_CONVERTERS = {
    Direction.MARK: hanyutils.mark_pinyin,
    Direction.NUMBER: hanyutils.number_pinyin,
    Direction.PINYIN_TO_ZHUYIN: hanyutils.pinyin_to_zhuyin,
    Direction.ZHUYIN_TO_MARKED: hanyutils.zhuyin_to_marked_pinyin,
    Direction.ZHUYIN_TO_NUMBERED: hanyutils.zhuyin_to_numbered_pinyin,
}

_HANZI_CONVERTERS = {
    Direction.HANZI_TO_MARKED: hanyutils.to_marked_pinyin,
    Direction.HANZI_TO_NUMBERED: hanyutils.to_numbered_pinyin,
    Direction.HANZI_TO_ZHUYIN: hanyutils.to_zhuyin,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    logger.info("=" * 50)
    logger.info("hanyutils API 服务启动")
    # 预热 pypinyin 数据
    lookup("好")
    logger.info("=" * 50)

    yield

    logger.info(f"汉字缓存: {lookup.cache_info()}")
    logger.info("hanyutils API 服务已停止")


# ===== FastAPI 应用 =====
app = FastAPI(
    title="hanyutils API",
    description="汉字、拼音、注音互转 API",
    version=hanyutils.__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ===== 请求日志中间件 =====

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """记录所有请求的详细日志"""
    request_id = str(uuid.uuid4())[:8]
    start_time = time.perf_counter()

    client_ip = request.client.host if request.client else "unknown"
    method = request.method
    path = request.url.path
    query = str(request.query_params) if request.query_params else ""

    logger.info(f"[{request_id}] --> {method} {path} {query} | IP: {client_ip}")

    try:
        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        status_code = response.status_code

        log_level = "info" if status_code < 400 else "warning" if status_code < 500 else "error"
        getattr(logger, log_level)(
            f"[{request_id}] <-- {status_code} | {elapsed_ms:.2f}ms"
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{elapsed_ms:.2f}ms"

        return response

    except Exception as e:
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.error(f"[{request_id}] <-- ERROR | {elapsed_ms:.2f}ms | {type(e).__name__}: {e}")
        raise


@app.exception_handler(HanyuError)
async def hanyu_error_handler(request: Request, exc: HanyuError):
    """转换失败 → 422"""
    logger.warning(f"转换失败: {request.url.path} | {type(exc).__name__}: {exc}")
    content = {"detail": str(exc), "error": type(exc).__name__}
    if isinstance(exc, ParseFailure):
        content["remainder"] = exc.remainder
    return JSONResponse(status_code=422, content=content)


# ===== API 路由 =====

@app.get("/health", response_model=HealthResponse)
async def health_check():
    """健康检查"""
    return HealthResponse(status="healthy", version=hanyutils.__version__)


@app.post("/convert", response_model=ConvertResponse)
async def convert(request: ConvertRequest):
    """按 direction 转换文本"""
    if request.direction in _HANZI_CONVERTERS:
        result = _HANZI_CONVERTERS[request.direction](request.text)
    else:
        result = _CONVERTERS[request.direction](request.text, request.mode)

    logger.debug(f"转换: {request.direction.value} '{request.text}' -> '{result}'")

    return ConvertResponse(text=request.text, direction=request.direction, result=result)


@app.get("/lookup/{char}", response_model=LookupResponse)
async def lookup_char(char: str):
    """查询单个汉字的读音"""
    hanzi = lookup(char)
    if hanzi is None:
        raise HTTPException(status_code=404, detail=f"未知汉字: {char}")

    # m/n/ng/hm/hng 等读音没有注音写法
    try:
        zhuyin = pinyin_to_zhuyin(hanzi.pron).render()
    except UnmappableSyllable:
        zhuyin = None

    return LookupResponse(
        char=hanzi.char,
        pron=hanzi.pron.marked(),
        pron_tw=hanzi.pron_tw.marked() if hanzi.pron_tw else None,
        alt=[p.marked() for p in hanzi.alt],
        zhuyin=zhuyin,
    )


# ===== 启动入口 =====

def main():
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))
    log_level = os.getenv("LOG_LEVEL", "info").lower()

    logger.info(f"启动 hanyutils API 服务: http://{host}:{port}")
    logger.info(f"API 文档: http://{host}:{port}/docs")
    logger.info(f"日志级别: {log_level.upper()}")

    uvicorn.run(
        "hanyutils.api.server:app",
        host=host,
        port=port,
        reload=False,
        workers=1,
        log_level=log_level,
    )


if __name__ == "__main__":
    main()
