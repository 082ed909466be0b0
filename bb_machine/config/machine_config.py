#!filepath: bb_machine/config/machine_config.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class MachineConfig(BaseModel):
    """
    MachineConfig

    语义：
      - 运行期参数，不影响机器语义
      - max_steps=None 表示不设上限（可能永不停机）
    """

    # step budget for run(); None = unbounded
    max_steps: Optional[int] = Field(default=None, ge=1)

    # progress log interval in steps; 0 disables
    log_every: int = Field(default=0, ge=0)
