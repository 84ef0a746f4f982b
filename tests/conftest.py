import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import tokenmerge
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from tokenmerge.core.models import Curriculum, CurriculumStep, MergeRule
from tokenmerge.curriculum import load_default_curriculum
from tokenmerge.engine import TokenizationSession


def pick_ids(session, *texts):
    """
    Ids of tokens with the given texts, input first, then output.

    Each token is used at most once, so pick_ids(s, "o", "o") returns
    both "o" tokens of "book".
    """
    pool = list(session.input_tokens) + list(session.output_tokens)
    ids = []
    for text in texts:
        token = next(t for t in pool if t.text == text and t.id not in ids)
        ids.append(token.id)
    return set(ids)


# Common test fixtures
@pytest.fixture
def default_curriculum() -> Curriculum:
    """The packaged four-step curriculum."""
    return load_default_curriculum()


@pytest.fixture
def session(default_curriculum) -> TokenizationSession:
    """Fresh session at step 0 ("cat")."""
    return TokenizationSession(default_curriculum)


@pytest.fixture
def pick():
    """Select token ids by text, see pick_ids."""
    return pick_ids


@pytest.fixture
def small_curriculum() -> Curriculum:
    """Two-step curriculum built in code."""
    return Curriculum(
        name="small",
        steps=(
            CurriculumStep(
                index=0,
                example_word="ab",
                rules=(MergeRule("a b", "ab", "pair"),),
            ),
            CurriculumStep(
                index=1,
                example_word="abc",
                rules=(
                    MergeRule("a b", "ab", "pair"),
                    MergeRule("ab c", "abc", "word"),
                ),
            ),
        ),
    )


@pytest.fixture
def sample_curriculum_data() -> dict:
    """Valid curriculum JSON data."""
    return {
        "schema_version": 1,
        "name": "Animals",
        "steps": [
            {
                "example_word": "dog",
                "narration": "Letters first.",
                "rules": [
                    {"from": "d o", "to": "do", "description": "Start"},
                    {"from": "do g", "to": "dog", "description": "Complete word"},
                ],
            },
            {
                "example_word": "cow",
                "rules": [
                    {"from": "c o w", "to": "cow"},
                ],
            },
        ],
    }
