import typing

import pytest

import cantus.events


class FixedRandomSource:

	"""Random source stub that always returns the same sample."""

	def __init__ (self, value: float) -> None:

		"""Store the value every call to sample() returns."""

		self.value = value
		self.calls = 0


	def sample (self) -> float:

		"""Return the fixed value."""

		self.calls += 1
		return self.value


	@classmethod
	def for_index (cls, index: int, count: int) -> "FixedRandomSource":

		"""Return a stub whose samples always select ``index`` out of ``count``."""

		return cls((index + 0.5) / count)


class RecordingPerformance:

	"""Performance visitor that records every call it receives."""

	def __init__ (self) -> None:

		"""Start with an empty call log."""

		self.calls: typing.List[typing.Tuple[str, cantus.events.Event]] = []


	def on_silence (self, event: cantus.events.Silence) -> None:

		"""Record a silence."""

		self.calls.append(("silence", event))


	def on_note (self, event: cantus.events.Note) -> None:

		"""Record a note."""

		self.calls.append(("note", event))


	def on_chord (self, event: cantus.events.Chord) -> None:

		"""Record a chord."""

		self.calls.append(("chord", event))


@pytest.fixture
def fixed_random () -> typing.Type[FixedRandomSource]:

	"""Provide the fixed random source stub class."""

	return FixedRandomSource


@pytest.fixture
def recording_performance () -> RecordingPerformance:

	"""Provide a fresh recording performer."""

	return RecordingPerformance()
