"""Syntax validation of fenced code blocks by declared language."""
import ast
import json
import logging
import re
import tomllib
from typing import Callable, Dict, List, Optional, Tuple

import yaml

from src.domain.entities.document import CodeBlock

logger = logging.getLogger(__name__)

_SESSION_RE = re.compile(r"^>>>( |$)")
_PROMPT_RE = re.compile(r"^(>>>|\.\.\.)( |$)")


def _strip_prompts(code: str) -> Tuple[str, List[int]]:
    """Turn an interactive session into the source that was typed.

    Lines starting with ``>>>`` or ``...`` are kept without the prompt;
    everything else is interpreter output and is dropped. The second value
    maps each kept line to its 1-based line in the session.
    """
    source = []
    origins = []
    for lineno, line in enumerate(code.splitlines(), 1):
        match = _PROMPT_RE.match(line)
        if match:
            source.append(line[match.end():])
            origins.append(lineno)
    return "\n".join(source), origins


def _check_python(code: str) -> None:
    if not any(_SESSION_RE.match(line) for line in code.splitlines()):
        ast.parse(code)
        return
    source, origins = _strip_prompts(code)
    try:
        ast.parse(source)
    except SyntaxError as e:
        # report the line of the session, not of the stripped source
        if e.lineno and origins:
            e.lineno = origins[min(e.lineno, len(origins)) - 1]
        raise


def _check_yaml(code: str) -> None:
    try:
        for _ in yaml.safe_load_all(code):
            pass
    except (ValueError, TypeError) as e:
        # constructors (timestamps, ...) fail after the document has parsed
        raise yaml.YAMLError(str(e)) from e


def _check_json(code: str) -> None:
    json.loads(code)


def _check_toml(code: str) -> None:
    tomllib.loads(code)


class CodeBlockValidator:
    """Validates code blocks in the languages it knows how to parse.

    Blocks in any other language (shell, text, undeclared) are accepted
    unchecked; ``supports`` tells the caller which ones were really checked.
    """

    _CHECKERS: Dict[str, Callable[[str], None]] = {
        'python': _check_python,
        'py': _check_python,
        'python3': _check_python,
        'pycon': _check_python,
        'yaml': _check_yaml,
        'yml': _check_yaml,
        'json': _check_json,
        'toml': _check_toml,
    }

    @property
    def supported_languages(self) -> list:
        return sorted(self._CHECKERS)

    def supports(self, language: str) -> bool:
        return language.lower() in self._CHECKERS

    def validate(self, block: CodeBlock) -> Optional[str]:
        """Return an error message for an invalid block, None otherwise."""
        checker = self._CHECKERS.get(block.language.lower())
        if checker is None:
            return None
        try:
            checker(block.code)
        except SyntaxError as e:
            # ast line numbers are relative to the block body
            lineno = (e.lineno or 0) + block.line
            return f"python syntax error at line {lineno}: {e.msg}"
        except yaml.YAMLError as e:
            return f"invalid YAML: {_first_line(str(e))}"
        except json.JSONDecodeError as e:
            return f"invalid JSON at line {e.lineno + block.line}: {e.msg}"
        except tomllib.TOMLDecodeError as e:
            return f"invalid TOML: {_first_line(str(e))}"
        except (ValueError, TypeError) as e:
            return f"invalid {block.language} block: {_first_line(str(e))}"
        logger.debug("validated %s block at line %d", block.language, block.line)
        return None


def _first_line(text: str) -> str:
    return text.strip().splitlines()[0] if text.strip() else text
