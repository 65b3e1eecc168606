"""Verb whitelist used to check the imperative mood of subjects."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigurationError

# Frequent English verbs in their base (imperative) form.
FREQUENT_VERBS: tuple[str, ...] = (
    "accept", "access", "account", "accumulate", "achieve", "acquire", "act",
    "activate", "adapt", "add", "address", "adjust", "admit", "adopt",
    "advance", "advise", "affect", "aggregate", "align", "allocate", "allow",
    "alter", "amend", "analyse", "analyze", "annotate", "announce", "answer",
    "anticipate", "append", "apply", "approve", "archive", "argue", "arrange",
    "ask", "assemble", "assert", "assess", "assign", "assist", "associate",
    "assume", "attach", "attempt", "attend", "authenticate", "authorize",
    "automate", "avoid", "backport", "balance", "base", "batch", "become",
    "begin", "believe", "benchmark", "bind", "block", "bookmark", "boost",
    "bootstrap", "break", "bring", "broadcast", "buffer", "build", "bump",
    "bundle", "buy", "cache", "calculate", "call", "cancel", "capitalize",
    "capture", "carry", "cast", "catch", "center", "centralize", "change",
    "check", "choose", "clamp", "clarify", "classify", "clean", "cleanup",
    "clear", "clone", "close", "collapse", "collect", "combine", "come",
    "comment", "commit", "compare", "compile", "complete", "compose",
    "compress", "compute", "concatenate", "conclude", "configure", "confirm",
    "connect", "consider", "consolidate", "constrain", "construct", "consume",
    "contain", "continue", "contribute", "control", "convert", "copy",
    "correct", "count", "cover", "create", "crop", "cut", "deactivate",
    "deal", "debounce", "debug", "decide", "declare", "decode", "decouple",
    "decrease", "decrement", "decrypt", "deduplicate", "default", "defer",
    "define", "delay", "delegate", "delete", "deliver", "demonstrate",
    "deploy", "deprecate", "derive", "describe", "deserialize", "design",
    "destroy", "detach", "detect", "determine", "develop", "differentiate",
    "disable", "disallow", "discard", "disconnect", "discover", "discuss",
    "dismiss", "dispatch", "display", "dispose", "distinguish", "distribute",
    "divide", "do", "document", "download", "downgrade", "drain", "draw",
    "drop", "dump", "duplicate", "edit", "eliminate", "embed", "emit",
    "enable", "encapsulate", "encode", "encourage", "encrypt", "end",
    "enforce", "enhance", "enlarge", "ensure", "enter", "enumerate",
    "escape", "establish", "estimate", "evaluate", "exclude", "execute",
    "exercise", "exit", "expand", "expect", "experiment", "explain",
    "explore", "export", "expose", "express", "extend", "extract", "fail",
    "fake", "fallback", "feed", "fetch", "fill", "filter", "finalize",
    "find", "finish", "fix", "flag", "flatten", "flip", "flush", "focus",
    "fold", "follow", "force", "fork", "format", "forward", "free", "freeze",
    "gather", "generalize", "generate", "get", "give", "go", "grant",
    "group", "grow", "guard", "handle", "harden", "hash", "help", "hide",
    "highlight", "hint", "hold", "hook", "ignore", "illustrate", "implement",
    "import", "improve", "include", "incorporate", "increase", "increment",
    "indent", "index", "indicate", "infer", "inform", "inherit",
    "initialize", "inject", "inline", "insert", "inspect", "install",
    "instantiate", "instrument", "integrate", "intercept", "internalize",
    "interpret", "introduce", "invalidate", "invert", "investigate",
    "invoke", "isolate", "iterate", "join", "keep", "kill", "label",
    "launch", "lay", "lead", "learn", "leave", "let", "lift", "limit",
    "link", "lint", "list", "load", "localize", "lock", "log", "look",
    "loosen", "lower", "maintain", "make", "manage", "map", "mark", "mask",
    "match", "measure", "memoize", "mention", "merge", "migrate", "minimize",
    "mirror", "mock", "modernize", "modify", "monitor", "mount", "move",
    "mute", "name", "navigate", "negate", "nest", "normalize", "note",
    "notify", "obtain", "offer", "omit", "open", "optimise", "optimize",
    "order", "organize", "output", "overhaul", "override", "overwrite",
    "pack", "package", "pad", "paginate", "parallelize", "parameterize",
    "parametrize", "parse", "partition", "pass", "patch", "pause", "perform",
    "permit", "persist", "pick", "pin", "place", "plan", "play", "polish",
    "poll", "populate", "port", "post", "postpone", "precompute",
    "predict", "prefer", "prefix", "prepare", "prepend", "present",
    "preserve", "prevent", "print", "prioritize", "process", "produce",
    "profile", "prohibit", "promote", "prompt", "propagate", "propose",
    "protect", "prove", "provide", "prune", "publish", "pull", "purge",
    "push", "put", "query", "queue", "quote", "raise", "rank", "reach",
    "read", "rearrange", "rebase", "rebuild", "recognize", "recommend",
    "reconcile", "record", "recover", "recurse", "redesign", "redirect",
    "reduce", "refactor", "refer", "refine", "reflect", "reformat",
    "refresh", "regenerate", "register", "reimplement", "reintroduce",
    "reject", "relax", "release", "reload", "relocate", "remain", "remember",
    "remove", "rename", "render", "reorder", "reorganize", "repair",
    "repeat", "rephrase", "replace", "reply", "report", "represent",
    "request", "require", "rerun", "reset", "reshape", "resize", "resolve",
    "respect", "respond", "restart", "restore", "restrict", "restructure",
    "retain", "retrieve", "retry", "return", "reuse", "reveal", "revert",
    "review", "revise", "revisit", "rewrite", "rework", "roll", "rollback",
    "rotate", "round", "route", "run", "sanitize", "save", "scale", "scan",
    "schedule", "scroll", "search", "secure", "see", "seed", "select",
    "send", "separate", "serialize", "serve", "set", "settle", "setup",
    "shorten", "show", "shrink", "shuffle", "shut", "sign", "silence",
    "simplify", "simulate", "skip", "slice", "sort", "specify", "speed",
    "split", "squash", "stabilize", "stage", "standardize", "start",
    "stash", "state", "stop", "store", "stream", "streamline", "strengthen",
    "strip", "structure", "stub", "style", "submit", "subscribe",
    "substitute", "subtract", "suggest", "supply", "support", "suppress",
    "surface", "swap", "switch", "sync", "synchronize", "take", "tag",
    "target", "teach", "tell", "template", "terminate", "test", "throttle",
    "throw", "tidy", "tighten", "toggle", "track", "transfer", "transform",
    "translate", "transpose", "treat", "trigger", "trim", "truncate", "try",
    "tune", "turn", "tweak", "type", "unblock", "uncomment", "understand",
    "undo", "unfreeze", "unify", "uninstall", "unlock", "unmount", "unpack",
    "unpin", "unregister", "unset", "unsubscribe", "untangle", "unwrap",
    "update", "upgrade", "upload", "use", "validate", "vendor", "verify",
    "version", "wait", "warn", "watch", "widen", "work", "wrap", "write",
    "yield",
)

_SEPARATOR_RE = re.compile(r"[,;]")


@dataclass(frozen=True)
class VerbWhitelist:
    """Lower-case verbs accepted as the first word of a subject."""

    verbs: frozenset[str]
    additional: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for verb in self.verbs | self.additional:
            if not verb:
                raise ValueError("Unexpected empty verb in the whitelist")
            if verb != verb.lower():
                raise ValueError(f"All verbs expected in lower case, but got: {verb}")

    def __contains__(self, word: object) -> bool:
        return word in self.verbs or word in self.additional

    def __len__(self) -> int:
        return len(self.verbs | self.additional)


def parse_verbs(text: str) -> set[str]:
    """Parse verbs separated by newlines, commas or semicolons.

    Args:
        text: Raw verb list, e.g. ``"rewrap, table\\nchrusimusi"``

    Returns:
        Lower-cased, non-empty verbs
    """
    verbs: set[str] = set()
    for line in text.split("\n"):
        for part in _SEPARATOR_RE.split(line):
            verb = part.strip()
            if verb:
                verbs.add(verb.lower())
    return verbs


def read_verbs_file(path: str | Path) -> set[str]:
    """Read additional verbs from a file.

    Raises:
        ConfigurationError: If the file does not exist or cannot be read
    """
    verbs_path = Path(path)
    if not verbs_path.is_file():
        raise ConfigurationError(
            f"The file referenced by path-to-additional-verbs does not exist: {path}"
        )

    try:
        content = verbs_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Failed to read the additional verbs from {path}: {e}") from e

    return parse_verbs(content)


def build_whitelist(
    additional_verbs: str | None = None,
    path_to_additional_verbs: str | Path | None = None,
) -> VerbWhitelist:
    """Merge the built-in verbs with the additional ones.

    Args:
        additional_verbs: Inline list of additional verbs
        path_to_additional_verbs: File with additional verbs

    Returns:
        The verb whitelist for this run
    """
    additional: set[str] = set()
    if additional_verbs:
        additional |= parse_verbs(additional_verbs)
    if path_to_additional_verbs:
        additional |= read_verbs_file(path_to_additional_verbs)

    return VerbWhitelist(verbs=frozenset(FREQUENT_VERBS), additional=frozenset(additional))
