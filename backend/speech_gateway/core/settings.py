from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 3000

    # Amazon Polly (credentials come from the standard AWS chain)
    aws_region: str = "us-east-1"

    # Request bodies larger than this are refused with 413
    max_body_bytes: int = 1_048_576

    # Bytes requested per read when draining the audio stream
    stream_chunk_size: int = 8192

    # Demo page directory; empty means the bundled static/ folder
    static_dir: str = ""

    log_level: str = "INFO"

    cors_origins: list[str] = ["*"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
