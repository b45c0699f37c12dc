"""End-to-end tests for DeprecationsAudit."""

from unittest.mock import AsyncMock

import pytest

from deprecation_audit.audits import DeprecationsAudit
from deprecation_audit.bundles import Bundle, MappingEntry, MappingTableResolver, StaticBundleProvider
from deprecation_audit.core.artifacts import Artifacts
from deprecation_audit.core.config import Config
from deprecation_audit.core.exceptions import BundleCollectionError


@pytest.fixture
def audit():
    return DeprecationsAudit(Config(log_level="warning", deprecation_source_tag="deprecation"))


@pytest.fixture
def structured_artifacts():
    return Artifacts.model_validate({
        "InspectorIssues": {
            "deprecationIssue": [
                {
                    "message": "Deprecated API X",
                    "sourceCodeLocation": {
                        "scriptId": "S1", "url": "a.js", "lineNumber": 5, "columnNumber": 10,
                    },
                },
            ],
        },
        "ConsoleMessages": [
            {"source": "deprecation", "text": "ignored", "url": "z.js", "lineNumber": 0, "columnNumber": 0},
        ],
    })


def test_meta():
    meta = DeprecationsAudit.meta

    assert meta.id == "deprecations"
    assert meta.title == "Avoids deprecated APIs"
    assert meta.failure_title == "Uses deprecated APIs"
    assert "web.dev/deprecations" in meta.description
    assert meta.required_artifacts == ["ConsoleMessages", "InspectorIssues", "SourceMaps", "Scripts"]


@pytest.mark.asyncio
async def test_no_signals_pass(audit):
    result = await audit.audit(Artifacts(), StaticBundleProvider())

    assert result.passed
    assert result.title == "Avoids deprecated APIs"
    data = result.to_dict()
    assert data["score"] == 1
    assert "displayValue" not in data
    assert data["details"]["items"] == []


@pytest.mark.asyncio
async def test_structured_issue_without_bundle(audit, structured_artifacts):
    result = await audit.audit(structured_artifacts, StaticBundleProvider())

    assert result.score == 0
    assert result.title == "Uses deprecated APIs"
    data = result.to_dict()
    assert data["id"] == "deprecations"
    assert data["displayValue"] == "1 warning found"
    row = data["details"]["items"][0]
    assert row["value"] == "Deprecated API X"
    assert row["source"]["url"] == "a.js"
    assert row["source"]["line"] == 5
    assert row["source"]["column"] == 9
    assert "originalPosition" not in row["source"]


@pytest.mark.asyncio
async def test_legacy_fallback_filters_provenance(audit):
    artifacts = Artifacts.model_validate({
        "InspectorIssues": {"deprecationIssue": []},
        "ConsoleMessages": [
            {"source": "deprecation", "text": "foo", "url": "b.js", "lineNumber": 1, "columnNumber": 0},
            {"source": "other", "text": "bar", "url": "c.js", "lineNumber": 2, "columnNumber": 0},
        ],
    })

    result = await audit.audit(artifacts, StaticBundleProvider())

    items = result.report.details.items
    assert len(items) == 1
    assert items[0].value == "foo"
    assert (items[0].source.url, items[0].source.line, items[0].source.column) == ("b.js", 1, 0)


@pytest.mark.asyncio
async def test_bundle_maps_structured_issue():
    artifacts = Artifacts.model_validate({
        "InspectorIssues": {
            "deprecationIssue": [
                {"message": "m", "scriptId": "S1", "url": "app.min.js", "lineNumber": 10, "columnNumber": 5},
            ],
        },
    })
    bundle = Bundle(script_id="S1", url="app.min.js", resolver=MappingTableResolver([
        MappingEntry(line=10, column=4, source_url="orig.js", source_line_number=2, source_column_number=1),
    ]))

    result = await DeprecationsAudit(Config()).audit(artifacts, StaticBundleProvider([bundle]))

    source = result.to_dict()["details"]["items"][0]["source"]
    assert source["originalPosition"] == {"url": "orig.js", "line": 2, "column": 1}


@pytest.mark.asyncio
async def test_bundle_provider_failure_aborts_run(audit, structured_artifacts):
    provider = AsyncMock()
    provider.request.side_effect = RuntimeError("bundle computation crashed")

    with pytest.raises(BundleCollectionError):
        await audit.audit(structured_artifacts, provider)


@pytest.mark.asyncio
async def test_bundles_requested_once(audit, structured_artifacts):
    provider = AsyncMock()
    provider.request.return_value = []

    await audit.audit(structured_artifacts, provider)

    provider.request.assert_awaited_once_with(structured_artifacts)


@pytest.mark.asyncio
async def test_source_tag_from_config(monkeypatch):
    monkeypatch.setenv("DEPRECATION_AUDIT_SOURCE_TAG", "intervention")
    artifacts = Artifacts.model_validate({
        "ConsoleMessages": [
            {"source": "intervention", "text": "a"},
            {"source": "deprecation", "text": "b"},
        ],
    })

    result = await DeprecationsAudit().audit(artifacts, StaticBundleProvider())

    assert [item.value for item in result.report.details.items] == ["a"]


@pytest.mark.asyncio
async def test_untagged_console_message_does_not_abort_run(audit):
    artifacts = Artifacts.model_validate({
        "InspectorIssues": {"deprecationIssue": [
            {"message": "m", "scriptId": "S1", "url": "a.js", "lineNumber": 1, "columnNumber": 1},
        ]},
        "ConsoleMessages": [{"text": "x", "level": "info"}],
    })

    result = await audit.audit(artifacts, StaticBundleProvider())

    assert [item.value for item in result.report.details.items] == ["m"]
