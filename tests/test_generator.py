# ===============================================
# tests/test_generator.py
# DocumentationGenerator: ordering, follow-ups, degraded results
# ===============================================
import asyncio
import re

from docgen.generate import DocumentationGenerator, GenerationResult
from docgen.generate.followups import FALLBACK_QUESTIONS
from docgen.generate.types import ChatMessage
from tests.conftest import FailingClient, StubClient


def generate(client, spec="{}", notes="", chat=None, **kw):
    gen = DocumentationGenerator(model_client=client, **kw)
    return asyncio.run(gen.generate_documentation(spec, notes, chat))


def test_sections_in_fixed_order(petstore_spec):
    out = generate(StubClient(), petstore_spec, "notes", [ChatMessage("user", "partners")])
    assert isinstance(out, GenerationResult)
    headings = re.findall(r"^# (.+)$", out.documentation, re.M)
    assert headings == ["Overview", "Authentication", "Getting Started", "Error Handling", "Glossary"]
    assert "Body of Authentication.\n\n# Getting Started" in out.documentation
    assert out.error is None


def test_follow_ups_bounded_to_three(stub_client):
    out = generate(stub_client)
    assert out.follow_up_questions == ["First?", "Second?", "Third?"]


def test_questions_prompt_sees_assembled_documentation(stub_client):
    out = generate(stub_client)
    last = stub_client.prompts[-1]
    assert last.startswith("Based on this documentation")
    assert out.documentation in last
    # 4 sections + 4 subsections + questions
    assert len(stub_client.prompts) == 9


def test_unparseable_questions_use_fallback():
    out = generate(StubClient(questions="   "))
    assert out.follow_up_questions == FALLBACK_QUESTIONS


def test_token_budgets_from_config(stub_client):
    generate(stub_client)
    budgets = {p.max_new_tokens for p in stub_client.params}
    assert budgets == {1000, 500, 200}
    assert all(p.temperature == 0.3 and p.top_p == 0.8 and p.do_sample is False for p in stub_client.params)


def test_missing_config_file_uses_defaults(tmp_path, stub_client):
    generate(stub_client, config_path=tmp_path / "absent.yaml")
    assert {p.max_new_tokens for p in stub_client.params} == {1000, 500, 200}


def test_failure_returns_error_result():
    out = generate(FailingClient("model is overloaded"))
    assert out.documentation.startswith("# Error\n")
    assert "model is overloaded" in out.documentation
    assert out.follow_up_questions == ["Would you like to try again?"]
    assert out.error == {"message": "model is overloaded", "type": "RuntimeError"}


def test_single_failed_subsection_fails_whole_attempt():
    out = generate(FailingClient("boom", fail_on="Quick Start Guide"))
    assert out.documentation == "# Error\nFailed to generate documentation: boom. Please try again."


def test_failure_on_questions_call():
    out = generate(FailingClient("late failure", fail_on="Based on this documentation"))
    assert out.documentation.startswith("# Error\n")
    assert out.follow_up_questions == ["Would you like to try again?"]


def test_exception_without_message():
    class Silent:
        def generate(self, prompt, params):
            raise ValueError()

    out = generate(Silent())
    assert "Unknown error" in out.documentation


def test_multi_heading_sections_keep_fixed_order():
    sections = {name: f"# {name}\nIntro for {name}.\n## Details\nMore." for name in
                ["Overview", "Authentication", "Error Handling", "Glossary"]}
    out = generate(StubClient(sections=sections))
    headings = re.findall(r"^# (.+)$", out.documentation, re.M)
    assert headings == ["Overview", "Authentication", "Getting Started", "Error Handling", "Glossary"]
    assert "# Overview\nIntro for Overview.\n## Details\nMore." in out.documentation


def test_all_section_calls_run_at_once():
    import threading
    from docgen.generate.generator import FAN_OUT

    assert FAN_OUT == 8
    # every section/subsection call blocks until all eight are in flight
    barrier = threading.Barrier(FAN_OUT, timeout=5)

    class Gated(StubClient):
        def generate(self, prompt, params):
            if not prompt.startswith("Based on this documentation"):
                barrier.wait()
            return super().generate(prompt, params)

    out = generate(Gated())
    assert out.error is None
    assert out.follow_up_questions == ["First?", "Second?", "Third?"]


def test_close_shuts_down_executor(stub_client):
    gen = DocumentationGenerator(model_client=stub_client)
    assert gen.sections.executor is gen.executor
    assert gen.getting_started.executor is gen.executor
    gen.close()
    out = asyncio.run(gen.generate_documentation("{}"))
    assert out.documentation.startswith("# Error\n")
