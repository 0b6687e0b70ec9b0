"""Tests for the two-stage transcription refiner."""

import pytest
from src.services.errors import CompletionError, TranscriptionError
from src.services.transcription.refiner import TranscriptionRefiner

AUDIO = b"\x1aE\xdf\xa3fake-webm"


@pytest.mark.asyncio
async def test_two_stage_transcription(settings, completion_factory):
    completion = completion_factory(
        AudioTranscriber="send five sweet to John",
        TranscriptionRefiner="Corrected transcription: send five SUI to John",
    )
    refiner = TranscriptionRefiner(completion, settings)
    result = await refiner.transcribe(AUDIO, "audio/webm", "English")

    assert result.transcription == "send 5 SUI to John"

    stage_one = completion.calls("AudioTranscriber")[0]
    assert stage_one.parts[0].data == AUDIO
    assert stage_one.parts[0].mime_type == "audio/webm"
    assert stage_one.prompt == "Transcribe this audio accurately. in this language English"

    stage_two = completion.calls("TranscriptionRefiner")[0]
    assert stage_two.parts == ()
    assert "send five sweet to John" in stage_two.prompt


@pytest.mark.asyncio
async def test_wrapping_quotes_are_removed(settings, completion_factory):
    completion = completion_factory(
        AudioTranscriber="swap ten suite for you ess dee see",
        TranscriptionRefiner='"swap 10 SUI for USDC"',
    )
    result = await TranscriptionRefiner(completion, settings).transcribe(AUDIO, "audio/wav")
    assert result.transcription == "swap 10 SUI for USDC"


@pytest.mark.asyncio
async def test_refinement_failure_fails_whole_call(settings, completion_factory):
    """Stage-1 text is never returned on its own."""
    completion = completion_factory(
        AudioTranscriber="send five sweet to John",
        TranscriptionRefiner=CompletionError("refinement down"),
    )
    with pytest.raises(TranscriptionError):
        await TranscriptionRefiner(completion, settings).transcribe(AUDIO, "audio/webm")


@pytest.mark.asyncio
async def test_stage_one_failure_skips_refinement(settings, completion_factory):
    completion = completion_factory(
        AudioTranscriber=CompletionError("asr down"),
        TranscriptionRefiner="unused",
    )
    with pytest.raises(TranscriptionError):
        await TranscriptionRefiner(completion, settings).transcribe(AUDIO, "audio/webm")
    assert completion.calls("TranscriptionRefiner") == []


@pytest.mark.asyncio
@pytest.mark.parametrize("stage_one, stage_two", [("   ", "x"), ("hello", "Corrected transcription:  ")])
async def test_empty_stage_output_fails(settings, completion_factory, stage_one, stage_two):
    completion = completion_factory(AudioTranscriber=stage_one, TranscriptionRefiner=stage_two)
    with pytest.raises(TranscriptionError):
        await TranscriptionRefiner(completion, settings).transcribe(AUDIO, "audio/webm")


@pytest.mark.asyncio
async def test_empty_audio_fails(settings, completion_factory):
    with pytest.raises(TranscriptionError):
        await TranscriptionRefiner(completion_factory(), settings).transcribe(b"", "audio/webm")
