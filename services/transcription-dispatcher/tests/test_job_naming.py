import pytest

from domain import JobNameBuilder, JobNameStrategy, media_suffix
from domain.job_naming import MAX_JOB_NAME_LENGTH


@pytest.mark.parametrize(
    "key, suffix",
    [
        ("meeting42.wav", "wav"),
        ("Meeting.MP3", "mp3"),
        ("a.b.c.mp4", "mp4"),
        ("folder.v1/recording", ""),
        ("noextension", ""),
    ],
)
def test_media_suffix(key, suffix) -> None:
    assert media_suffix(key) == suffix


def test_stem_keeps_simple_names() -> None:
    builder = JobNameBuilder(JobNameStrategy.STEM)
    assert builder.build("meeting42.wav") == "meeting42"
    assert builder.build("call.2024-01-05.mp3") == "call.2024-01-05"


def test_stem_is_deterministic() -> None:
    builder = JobNameBuilder()
    key = "uploads/2024/team sync.wav"
    assert builder.build(key) == builder.build(key)


def test_stem_hashes_rewritten_names() -> None:
    builder = JobNameBuilder()
    slashed = builder.build("a/b.wav")
    underscored = builder.build("a_b.wav")

    assert underscored == "a_b"
    assert slashed.startswith("a-b-")
    assert slashed != underscored


def test_legacy_splits_on_first_dot() -> None:
    builder = JobNameBuilder(JobNameStrategy.LEGACY)
    assert builder.build("call.2024-01-05.mp3") == "call"
    assert builder.build("call.2024-01-06.mp3") == "call"


def test_hashed_distinguishes_formats() -> None:
    builder = JobNameBuilder(JobNameStrategy.HASHED)
    mp3 = builder.build("interview.mp3")
    wav = builder.build("interview.wav")

    assert mp3 != wav
    assert mp3.startswith("interview-")
    assert wav.startswith("interview-")


@pytest.mark.parametrize("strategy", list(JobNameStrategy))
def test_names_fit_service_limits(strategy) -> None:
    name = JobNameBuilder(strategy).build("x" * 500 + ".wav")
    assert 0 < len(name) <= MAX_JOB_NAME_LENGTH


def test_name_made_only_of_invalid_chars_is_digest() -> None:
    name = JobNameBuilder().build("日本語.wav")
    assert len(name) == 16
    assert all(c in "0123456789abcdef" for c in name)
