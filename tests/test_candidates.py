"""Tests for fuzzy de-duplication of discovered hotels."""

from dedup.candidates import CandidateDeduplicator
from models.candidate import HotelCandidate


def candidate(name, price=120):
    return HotelCandidate(name=name, price_per_night=price, neighborhood="plaka")


class TestCandidateDeduplicator:
    def test_known_hotel_dropped(self):
        dedup = CandidateDeduplicator(["Electra Palace Athens"])
        result = dedup.deduplicate([candidate("electra palace athens"), candidate("Hotel Phaedra")])
        assert [c.name for c in result] == ["Hotel Phaedra"]

    def test_word_order_ignored(self):
        dedup = CandidateDeduplicator(["Palace Electra"])
        assert dedup.is_known("Electra Palace")

    def test_different_hotel_kept(self):
        dedup = CandidateDeduplicator(["Herodion Hotel"])
        assert not dedup.is_known("Hotel Grande Bretagne")

    def test_repeats_within_batch_dropped(self):
        dedup = CandidateDeduplicator()
        result = dedup.deduplicate([candidate("Athens Gate"), candidate("Athens Gate", 130)])
        assert len(result) == 1
        assert result[0].price_per_night == 120

    def test_empty(self):
        assert CandidateDeduplicator([]).deduplicate([]) == []
