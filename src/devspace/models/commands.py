"""Docker command-line invocation models.

Each model is built fresh for a single call and translated into one
argument vector (without the executable itself).
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class BuildSpec(BaseModel):
    """Arguments for ``docker build``."""
    tag: str
    dockerfile: str
    context: str = Field(default=".")
    labels: Dict[str, str] = Field(default_factory=dict)

    def to_args(self) -> List[str]:
        args = ["build", "-t", self.tag, "-f", self.dockerfile]
        for key, value in self.labels.items():
            args.extend(["--label", f"{key}={value}"])
        args.append(self.context)
        return args


class RunSpec(BaseModel):
    """Arguments for ``docker run``."""
    name: str
    image: str
    detach: bool = False
    labels: Dict[str, str] = Field(default_factory=dict)
    volumes: List[str] = Field(default_factory=list, description="host:container pairs")
    env: Dict[str, str] = Field(default_factory=dict)
    workdir: Optional[str] = None
    command: List[str] = Field(default_factory=list)

    def to_args(self) -> List[str]:
        args = ["run", "--name", self.name]
        if self.detach:
            args.append("-d")
        for key, value in self.labels.items():
            args.extend(["--label", f"{key}={value}"])
        for volume in self.volumes:
            args.extend(["-v", volume])
        for key, value in self.env.items():
            args.extend(["-e", f"{key}={value}"])
        if self.workdir:
            args.extend(["-w", self.workdir])
        args.append(self.image)
        args.extend(self.command)
        return args


class ExecSpec(BaseModel):
    """Arguments for ``docker exec``."""
    name: str
    command: List[str]
    interactive: bool = True
    tty: bool = True
    workdir: Optional[str] = None
    user: Optional[str] = None

    def to_args(self) -> List[str]:
        args = ["exec"]
        flags = ("i" if self.interactive else "") + ("t" if self.tty else "")
        if flags:
            args.append(f"-{flags}")
        if self.workdir:
            args.extend(["-w", self.workdir])
        if self.user:
            args.extend(["-u", self.user])
        args.append(self.name)
        args.extend(self.command)
        return args
