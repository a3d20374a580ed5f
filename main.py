# main.py
import logging
import os
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from pathsandbox.commands.protocol import Command, GridChanged, Snapshot
from pathsandbox.sandbox import Sandbox
from pathsandbox.utils.config import SandboxConfig
from pathsandbox.utils.consts import SERVER_HOST, SERVER_PORT

logger = logging.getLogger("pathsandbox.server")


# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class CommandInput(BaseModel):
    command: Command


class CommandBatchInput(BaseModel):
    # Processed in list order, nothing else interleaves
    commands: List[Command]


def create_app(config: Optional[SandboxConfig] = None) -> FastAPI:
    """Build the HTTP command surface around a fresh Sandbox."""
    app = FastAPI(title="Grid Path Sandbox")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.sandbox = Sandbox(config)

    def sandbox_of(request: Request) -> Sandbox:
        return request.app.state.sandbox

    # =========================================================================
    # ENDPOINTS
    # =========================================================================

    @app.get("/status")
    def health_check():
        return {"status": "ok", "message": "Path sandbox is running"}

    @app.get("/snapshot", response_model=Snapshot)
    def read_snapshot(request: Request):
        return sandbox_of(request).snapshot()

    @app.post("/commands", response_model=GridChanged)
    def submit_command(input_data: CommandInput, request: Request):
        try:
            return sandbox_of(request).apply(input_data.command)
        except Exception as e:
            logger.exception("Command %s failed", input_data.command.kind)
            raise HTTPException(status_code=500, detail=str(e))

    @app.post("/commands/batch", response_model=List[GridChanged])
    def submit_commands(input_data: CommandBatchInput, request: Request):
        try:
            return sandbox_of(request).submit(input_data.commands)
        except Exception as e:
            logger.exception("Batch of %d commands failed", len(input_data.commands))
            raise HTTPException(status_code=500, detail=str(e))

    return app


if __name__ == "__main__":
    logging.basicConfig(
        level=os.getenv("SANDBOX_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    uvicorn.run(create_app(SandboxConfig.from_env()), host=SERVER_HOST, port=SERVER_PORT)
