"""Tests for the sample entry points: errors are printed and the exit status is 1."""

import sys
from unittest.mock import Mock, patch

import pytest

from shopping.accounts import account_status, account_tax, add_user, delete_account_batch, shipping_settings
from shopping.common.errors import ApiError, ConfigError
from shopping.orders import workflow
from shopping.products import delete_product

STANDALONE = {"merchant_id": "123", "is_mca": False, "account_sample_user": "new@example.com", "sandbox": False}
AGGREGATOR = dict(STANDALONE, is_mca=True)


def run_main(module, monkeypatch, argv, config=None, client=None, setup_error=None):
    """Run module.main() with service_setup patched; returns the SystemExit code (None if it did not exit)."""
    monkeypatch.setattr(sys, "argv", [module.__name__] + argv)
    setup = Mock(side_effect=setup_error) if setup_error else Mock(return_value=(config, client))
    with patch.object(module, "service_setup", setup):
        try:
            module.main()
        except SystemExit as e:
            return e.code
    return None


# =============================================================================
# Remote errors
# =============================================================================


def test_add_user_reports_update_failure(monkeypatch, capsys):
    client = Mock()
    client.get_account.return_value = {"id": "123", "users": []}
    client.update_account.side_effect = ApiError(404, "Account 123 has been removed")

    code = run_main(add_user, monkeypatch, [], STANDALONE, client)

    assert code == 1
    assert "ERROR: [404] Account 123 has been removed" in capsys.readouterr().out


def test_add_user_reports_missing_account(monkeypatch, capsys):
    client = Mock()
    client.get_account.side_effect = ApiError(404, "Not found")

    code = run_main(add_user, monkeypatch, [], STANDALONE, client)

    out = capsys.readouterr().out
    assert code == 1
    assert "Account 123 not found." in out
    assert "ERROR: [404] Not found" in out


def test_add_user_requires_sample_user(monkeypatch, capsys):
    config = dict(STANDALONE, account_sample_user=None)

    code = run_main(add_user, monkeypatch, [], config, Mock())

    assert code == 1
    assert "ERROR: No account sample user address" in capsys.readouterr().out


def test_delete_product_reports_api_error(monkeypatch, capsys):
    client = Mock()
    client.delete_product.side_effect = ApiError(404, "item not found")

    code = run_main(delete_product, monkeypatch, ["online:en:US:1"], STANDALONE, client)

    assert code == 1
    assert "ERROR: [404] item not found" in capsys.readouterr().out


def test_missing_configuration_is_reported(monkeypatch, capsys):
    code = run_main(delete_product, monkeypatch, ["online:en:US:1"], setup_error=ConfigError("MERCHANT_ID not set"))

    assert code == 1
    assert "ERROR: MERCHANT_ID not set" in capsys.readouterr().out


# =============================================================================
# Orders workflow
# =============================================================================


def test_workflow_reports_abort(monkeypatch, capsys, make_fake_client):
    client = make_fake_client()
    client.status_overrides["acknowledge_order"] = "duplicate"

    code = run_main(workflow, monkeypatch, [], STANDALONE, client)

    assert code == 1
    assert "ABORTED: Could not acknowledge TEST-1: execution status duplicate" in capsys.readouterr().out


def test_workflow_reports_api_error(monkeypatch, capsys):
    client = Mock()
    client.create_test_order.side_effect = ApiError(400, "Invalid template")

    code = run_main(workflow, monkeypatch, ["--template", "bogus"], STANDALONE, client)

    assert code == 1
    assert "ERROR: [400] Invalid template" in capsys.readouterr().out
    client.create_test_order.assert_called_once_with("bogus")


def test_workflow_completes(monkeypatch, capsys, make_fake_client):
    code = run_main(workflow, monkeypatch, [], STANDALONE, make_fake_client())

    assert code is None
    assert "Done with the Orders workflow." in capsys.readouterr().out


# =============================================================================
# MCA-only actions
# =============================================================================


@pytest.mark.parametrize("module", [account_status, account_tax, shipping_settings])
def test_list_requires_mca(module, monkeypatch, capsys):
    client = Mock()

    code = run_main(module, monkeypatch, ["list"], STANDALONE, client)

    assert code == 1
    assert "ERROR: Configured Merchant Center account must be a multi-client account." in capsys.readouterr().out
    assert client.method_calls == []


def test_get_other_account_requires_mca(monkeypatch, capsys):
    code = run_main(account_tax, monkeypatch, ["get", "456"], STANDALONE, Mock())

    assert code == 1
    assert "ERROR: Non-MCA accounts can only get their own information." in capsys.readouterr().out


def test_delete_account_batch_requires_mca(monkeypatch, capsys):
    client = Mock()

    code = run_main(delete_account_batch, monkeypatch, ["9"], STANDALONE, client)

    assert code == 1
    client.custombatch_accounts.assert_not_called()


# =============================================================================
# Batch exit status
# =============================================================================


def test_delete_account_batch_exits_on_failed_entry(monkeypatch, capsys):
    client = Mock()
    client.custombatch_accounts.return_value = {
        "entries": [{"batchId": 1}, {"batchId": 2, "errors": {"errors": [{"reason": "notFound", "message": "gone"}]}}]
    }

    code = run_main(delete_account_batch, monkeypatch, ["9", "10"], AGGREGATOR, client)

    assert code == 1
    assert "Batch item 2 resulted in an error." in capsys.readouterr().out


def test_delete_account_batch_all_successful(monkeypatch, capsys):
    client = Mock()
    client.custombatch_accounts.return_value = {"entries": [{"batchId": 1}, {"batchId": 2}]}

    code = run_main(delete_account_batch, monkeypatch, ["9", "10"], AGGREGATOR, client)

    assert code is None
    assert "Batch item 2 successful." in capsys.readouterr().out


def test_delete_account_batch_overall_failure_exits(monkeypatch, capsys):
    client = Mock()
    client.custombatch_accounts.side_effect = ApiError(403, "Forbidden")

    code = run_main(delete_account_batch, monkeypatch, ["9"], AGGREGATOR, client)

    out = capsys.readouterr().out
    assert code == 1
    assert "Overall batch call resulted in an error." in out
    assert "ERROR: [403] Forbidden" in out
