import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv
from loguru import logger

load_dotenv()


@dataclass
class Settings:
    # MongoDB
    mongo_uri: str = os.getenv("MONGO_URI", os.getenv("MONGO_LOCAL", "mongodb://localhost:27017"))
    mongo_database: str = os.getenv("MONGO_DATABASE", "Bookstore")
    mongo_collection: str = os.getenv("MONGO_COLLECTION", "books")
    mongo_timeout_ms: int = int(os.getenv("MONGO_TIMEOUT_MS", "10000"))

    # gRPC
    rpc_port: int = int(os.getenv("RPC_PORT", "9090"))
    rpc_target: str = os.getenv("RPC_TARGET", "localhost:9090")
    rpc_timeout: float = float(os.getenv("RPC_TIMEOUT", "10"))
    rpc_max_workers: int = int(os.getenv("RPC_MAX_WORKERS", "10"))

    # HTTP gateway
    http_host: str = os.getenv("HTTP_HOST", "0.0.0.0")
    http_port: int = int(os.getenv("HTTP_PORT", "9091"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()


def configure_logging(level="INFO"):
    logger.remove()
    logger.add(
        sink=sys.stderr,
        level=level.upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
               "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - "
               "<level>{message}</level>",
    )
