from __future__ import annotations
import random
from typing import Iterator, List, Optional

__all__ = ["generate", "KINDS"]

KINDS = ("paths", "commands", "mixed")

_PREFIXES = ["src", "pkg", "internal", "cmd", "test", "docs", "scripts",
             "config", "api", "lib", "vendor", "build", "tools"]
_COMPONENTS = ["service", "handler", "controller", "model", "view", "util",
               "helper", "manager", "processor", "validator", "converter",
               "repository", "entity", "dto", "middleware", "interceptor"]
_SUFFIXES = [".go", ".ts", ".js", ".py", ".java", ".rs", ".c", ".cpp",
             ".h", ".hpp", ".rb", ".php", ".sh", ".yaml", ".json", ".md"]

_COMMANDS = ["git commit -m", "docker build -t", "kubectl apply -f", "npm install",
             "go build", "cargo run", "python -m", "make", "terraform apply",
             "ansible-playbook", "systemctl restart", "journalctl -u", "curl -X POST",
             "wget", "ssh", "rsync -av", "tar -xzvf", "grep -r", "find . -name",
             "ps aux | grep"]
_ARGS = ["production", "staging", "development", "test", "service", "application",
         "database", "cache", "frontend", "backend", "api", "worker", "config",
         "deployment", "migration", "backup"]

_NAMES = ["john", "jane", "alice", "bob", "charlie", "diana",
          "fix", "feat", "refactor", "update", "improve", "add"]


def _path(rng: random.Random) -> str:
    depth = rng.randint(1, 5)
    parts = [rng.choice(_PREFIXES)]
    parts += [rng.choice(_COMPONENTS) for _ in range(depth - 1)]
    parts.append(f"{rng.choice(_COMPONENTS)}_{rng.randrange(1000)}{rng.choice(_SUFFIXES)}")
    return "/".join(parts)


def _command(rng: random.Random, i: int) -> str:
    args = "_".join(rng.choice(_ARGS) for _ in range(rng.randint(1, 3)))
    return f"{rng.choice(_COMMANDS)} {args}_{i}"


def _other(rng: random.Random) -> str:
    name = rng.choice(_NAMES)
    pick = rng.randrange(7)
    if pick == 0:
        return f"User: {name} <{name}@example.com>"
    if pick == 1:
        return f"Issue #{rng.randrange(10000)}: {name}"
    if pick == 2:
        return f"PR #{rng.randrange(10000)}: {name}"
    if pick == 3:
        return f"Branch: feature/{name}-{rng.randrange(1000)}"
    if pick == 4:
        return f"Tag: v{rng.randrange(5)}.{rng.randrange(20)}.{rng.randrange(100)}"
    if pick == 5:
        return f"Commit: {rng.getrandbits(63):x}"
    return f"Server: {name}-{rng.randrange(100)}.prod.example.com"


def generate(count: int, kind: str = "paths", seed: Optional[int] = None) -> Iterator[str]:
    """
    Yield `count` synthetic item lines. Same seed -> same lines.
    mixed = 50% paths, 30% commands, 20% other, shuffled.
    """
    if kind not in KINDS:
        raise ValueError(f"Unknown dataset type: {kind!r} (expected one of {KINDS})")
    count = max(0, int(count))
    rng = random.Random(seed)

    if kind == "paths":
        for _ in range(count):
            yield _path(rng)
        return
    if kind == "commands":
        for i in range(count):
            yield _command(rng, i)
        return

    n_paths, n_cmds = count // 2, count * 3 // 10
    kinds: List[str] = ["path"] * n_paths + ["cmd"] * n_cmds + ["other"] * (count - n_paths - n_cmds)
    rng.shuffle(kinds)
    for i, k in enumerate(kinds):
        if k == "path":
            yield _path(rng)
        elif k == "cmd":
            yield _command(rng, i)
        else:
            yield _other(rng)
