"""
Tests for the runtime driver: scripted prompting, session records, the CLI.

Sessions are driven entirely by scripts here. Any attempt to fall back to
interactive input fails the test.
"""

import json

import pytest

from turing.__main__ import main
from turing.checkers import build_default_catalog
from turing.core.candidate import Candidate
from turing.core.checker import Branch, Checker, Catalog
from turing.core.engine import Phase
from turing.session import Prompter, SessionRecord, run_session


# ── Helpers ──────────────────────────────────────────────────────────────────

def no_input(prompt):
    pytest.fail("session asked for interactive input")


def scripted(script, **kwargs) -> Prompter:
    return Prompter(script=script, input_fn=no_input, **kwargs)


def value_checker(checker_id: int, colour: str) -> Checker:
    def is_value(v):
        return lambda c: getattr(c, colour) == v

    return Checker(checker_id, f"{colour} value", tuple(
        Branch(f"{colour} == {v}", is_value(v)) for v in range(1, 6)
    ))


def identity_catalog() -> Catalog:
    catalog = Catalog()
    for i, colour in enumerate(("blue", "yellow", "purple"), start=1):
        catalog.register(value_checker(i, colour))
    return catalog.freeze()


# ── Prompter ─────────────────────────────────────────────────────────────────

class TestPrompter:
    def test_script_consumed_in_order(self):
        prompter = scripted("3, 2,7")
        assert [prompter.next_int("?") for _ in range(3)] == [3, 2, 7]

    def test_falls_back_to_input(self):
        answers = iter(["42"])
        prompter = Prompter(script="1", input_fn=lambda prompt: next(answers))
        assert prompter.next_int("?") == 1
        assert prompter.next_int("?") == 42

    def test_bad_typed_input_asks_again(self, capsys):
        answers = iter(["abc", "5"])
        prompter = Prompter(input_fn=lambda prompt: next(answers))
        assert prompter.next_int("?") == 5
        assert "Enter a number" in capsys.readouterr().out

    def test_quit_interrupts(self):
        prompter = Prompter(input_fn=lambda prompt: "q")
        with pytest.raises(KeyboardInterrupt):
            prompter.next_int("?")

    def test_bad_scripted_value_is_an_error(self):
        prompter = scripted("1,x")
        prompter.next_int("?")
        with pytest.raises(ValueError, match="'x'"):
            prompter.next_int("?")

    def test_log_is_a_replayable_script(self, tmp_path):
        log = tmp_path / "turing.log"
        prompter = scripted("3,2,7", log_path=str(log))
        for _ in range(3):
            prompter.next_int("?")
        assert log.read_text().strip() == "3,2,7"
        assert prompter.script == "3,2,7"


# ── SessionRecord ────────────────────────────────────────────────────────────

class TestSessionRecord:
    def make_record(self) -> SessionRecord:
        record = SessionRecord(checker_ids=[2, 7], evict_ambiguous=False)
        record.record(Candidate(1, 2, 3), 0, False)
        record.record(Candidate(4, 4, 4), 1, True)
        return record

    def test_dict_round_trip(self):
        record = self.make_record()
        restored = SessionRecord.from_dict(record.to_dict())
        assert restored == record

    def test_json_round_trip(self, tmp_path):
        record = self.make_record()
        path = str(tmp_path / "session.json")
        record.save(path)
        assert json.loads(open(path).read())["checker_ids"] == [2, 7]
        assert SessionRecord.load(path) == record

    def test_replay_rebuilds_engine(self):
        record = self.make_record()
        engine = record.replay(build_default_catalog())
        assert engine.step == 2
        # blue >= 3 and purple even
        assert all(c.blue >= 3 and c.purple % 2 == 0 for c in engine.remaining())
        assert engine.remaining_count() == 3 * 5 * 2


# ── run_session ──────────────────────────────────────────────────────────────

class TestRunSession:
    def test_full_game_solves(self, capsys):
        # 3 verifiers: 1, 2, 3; probe 241; all three say true
        prompter = scripted("3,1,2,3,241,0,1,1,1,2,1")
        engine, record = run_session(prompter, identity_catalog(), verbose=False)
        assert engine.phase is Phase.SOLVED
        assert engine.solution == Candidate(2, 4, 1)
        assert record.checker_ids == [1, 2, 3]
        assert len(record.observations) == 3
        assert "Solved: the code is (2 4 1)" in capsys.readouterr().out

    def test_unknown_checker_asks_again(self, capsys):
        prompter = scripted("1,99,2,0")
        engine, _ = run_session(prompter, build_default_catalog(),
                                evict_ambiguous=False, verbose=False)
        assert engine.checker_ids == (2,)
        assert "No checker with ID 99" in capsys.readouterr().out

    def test_contradiction_is_reported(self, capsys):
        prompter = scripted("123,0,1,0,0")
        engine, _ = run_session(prompter, build_default_catalog(), checker_ids=[2],
                                evict_ambiguous=False, verbose=False)
        assert engine.phase is Phase.EXHAUSTED
        assert "contradict" in capsys.readouterr().out

    def test_bad_probe_and_index_are_skipped(self, capsys):
        prompter = scripted("999,123,5,-1,0")
        engine, record = run_session(prompter, build_default_catalog(), checker_ids=[2],
                                     evict_ambiguous=False, verbose=False)
        out = capsys.readouterr().out
        assert "should be in [1-5]" in out
        assert "Verifier index should be in [0-0] : 5" in out
        assert record.observations == []
        assert engine.remaining_count() == 125

    def test_result_other_than_zero_or_one_asks_again(self, capsys):
        # probe 123, verifier 0, result 5 (rejected) then 0
        prompter = scripted("123,0,5,0,-1,0")
        engine, record = run_session(prompter, build_default_catalog(), checker_ids=[2],
                                     evict_ambiguous=False, verbose=False)
        assert "Result should be 0 or 1 : 5" in capsys.readouterr().out
        assert record.observations == [[123, 0, False]]
        assert engine.remaining_count() == 75

    def test_saves_after_each_observation(self, tmp_path):
        path = str(tmp_path / "session.json")
        prompter = scripted("123,0,0,-1,0")
        run_session(prompter, build_default_catalog(), checker_ids=[2],
                    evict_ambiguous=False, save_path=path, verbose=False)
        assert SessionRecord.load(path).observations == [[123, 0, False]]

    def test_resume_from_record(self):
        record = SessionRecord(checker_ids=[2], evict_ambiguous=False)
        record.record(Candidate(1, 2, 3), 0, False)
        engine, resumed = run_session(scripted("0"), build_default_catalog(),
                                      record=record, verbose=False)
        assert resumed is record
        assert engine.remaining_count() == 75


# ── CLI ──────────────────────────────────────────────────────────────────────

class TestCli:
    def test_list(self, capsys):
        main(["--list"])
        out = capsys.readouterr().out
        assert "blue triangle compared to 3" in out
        assert "Which colour has the digit smaller" in out
        assert "2: purple < (yellow and blue)" in out

    def test_unknown_checker_is_an_error(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", no_input)
        with pytest.raises(SystemExit) as exit_info:
            main(["--checkers", "99", "--script", "0",
                  "--log", str(tmp_path / "turing.log"), "--quiet"])
        assert exit_info.value.code == 1
        assert "ERROR : No checker with ID 99" in capsys.readouterr().out

    def test_missing_session_file_is_an_error(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", no_input)
        with pytest.raises(SystemExit) as exit_info:
            main(["--load", str(tmp_path / "absent.json"), "--script", "0",
                  "--log", str(tmp_path / "turing.log"), "--quiet"])
        assert exit_info.value.code == 1
        assert "ERROR :" in capsys.readouterr().out

    def test_scripted_run_writes_log(self, tmp_path, monkeypatch):
        monkeypatch.setattr("builtins.input", no_input)
        log = tmp_path / "turing.log"
        main(["--checkers", "2", "--keep-ambiguous", "--script", "123,0,0,-1,0",
              "--log", str(log), "--quiet"])
        assert log.read_text().strip() == "123,0,0,-1,0"

    def test_save_then_load(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", no_input)
        path = str(tmp_path / "session.json")
        log = str(tmp_path / "turing.log")
        main(["--checkers", "2,7", "--keep-ambiguous", "--script", "123,0,0,-1,0",
              "--log", log, "--save", path, "--quiet"])
        assert SessionRecord.load(path).checker_ids == [2, 7]

        main(["--load", path, "--script", "0", "--log", log, "--quiet"])
        out = capsys.readouterr().out
        assert "Loaded session" in out
        assert "Stopped with 75 candidates left" in out

    def test_interrupt_is_caught(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda prompt: "q")
        main(["--checkers", "2", "--keep-ambiguous",
              "--log", str(tmp_path / "turing.log"), "--quiet"])
        assert "Interrupted." in capsys.readouterr().out
