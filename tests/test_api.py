"""Tests for the REST API."""

from datetime import date

import pytest

from ledgerbook.api.errors import status_for
from ledgerbook.domain.errors import (
    DependencyError,
    DomainError,
    DuplicateCodeError,
    DuplicateVoucherNumberError,
    NotFoundError,
    StorageError,
    UnbalancedVoucherError,
)
from conftest import credit, debit


def voucher_body(number="V010", amount=500, **extra):
    body = {
        "voucherNo": number,
        "date": "2024-03-05",
        "description": "Cash sale",
        "lines": [
            {"account": "1001", "type": "debit", "amount": amount},
            {"account": "6001", "side": "credit", "amount": amount},
        ],
    }
    body.update(extra)
    return body


class TestErrorMapping:
    @pytest.mark.parametrize(
        "error, expected",
        [
            (DuplicateVoucherNumberError("V1"), 400),
            (UnbalancedVoucherError(1, 2, 1), 400),
            (NotFoundError("gone"), 404),
            (DuplicateCodeError("1001"), 409),
            (DependencyError("in use"), 409),
            (StorageError("disk"), 500),
            (DomainError("other"), 400),
        ],
    )
    def test_status_for(self, error, expected):
        assert status_for(error) == expected

    def test_unknown_route_uses_error_body(self, api_client):
        response = api_client.get("/nowhere")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_malformed_body_is_bad_request(self, api_client):
        response = api_client.post("/accounts", json={"name": "Cash"})

        assert response.status_code == 400
        assert "code" in response.json()["error"]


def test_health(api_client):
    response = api_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestAccountsApi:
    """Tests for /accounts."""

    def test_create_and_list(self, api_client):
        response = api_client.post(
            "/accounts", json={"code": "1001", "name": "Cash", "type": "asset", "balance": 250}
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Account created"
        account_id = response.json()["id"]

        accounts = api_client.get("/accounts").json()
        assert accounts[0]["id"] == account_id
        assert accounts[0]["balance"] == 250
        assert "created_at" in accounts[0]

    def test_duplicate_code_conflict(self, api_client, sample_accounts):
        response = api_client.post("/accounts", json={"code": "1001", "name": "Cash", "type": "asset"})

        assert response.status_code == 409
        assert response.json() == {"error": "Account with code '1001' already exists"}

    def test_bad_type(self, api_client):
        response = api_client.post("/accounts", json={"code": "1", "name": "X", "type": "revenue"})

        assert response.status_code == 400
        assert "Invalid account type" in response.json()["error"]

    def test_update(self, api_client, sample_accounts):
        account_id = sample_accounts["1001"].id

        response = api_client.put(f"/accounts/{account_id}", json={"name": "Petty Cash"})

        assert response.json() == {"message": "Account updated"}
        names = {a["code"]: a["name"] for a in api_client.get("/accounts").json()}
        assert names["1001"] == "Petty Cash"

    def test_delete_referenced_account(self, api_client, pending_voucher, sample_accounts):
        response = api_client.delete(f"/accounts/{sample_accounts['1001'].id}")

        assert response.status_code == 409
        assert "referenced by 1 voucher" in response.json()["error"]

    def test_delete_missing(self, api_client):
        assert api_client.delete("/accounts/missing").status_code == 404


class TestVouchersApi:
    """Tests for /vouchers."""

    def test_create_and_get(self, api_client, sample_accounts):
        response = api_client.post("/vouchers", json=voucher_body())

        assert response.status_code == 200
        voucher_id = response.json()["id"]

        voucher = api_client.get(f"/vouchers/{voucher_id}").json()
        assert voucher["voucher_no"] == "V010"
        assert voucher["status"] == "pending"
        assert voucher["amount"] == 500
        assert [l["side"] for l in voucher["lines"]] == ["debit", "credit"]

    def test_snake_case_request_accepted(self, api_client, sample_accounts):
        body = voucher_body()
        body["voucher_no"] = body.pop("voucherNo")

        assert api_client.post("/vouchers", json=body).status_code == 200

    def test_unbalanced(self, api_client, sample_accounts):
        body = voucher_body()
        body["lines"][1]["amount"] = 400

        response = api_client.post("/vouchers", json=body)

        assert response.status_code == 400
        assert "not balanced" in response.json()["error"]

    def test_duplicate_number_is_bad_request(self, api_client, pending_voucher):
        response = api_client.post("/vouchers", json=voucher_body(number="V001"))

        assert response.status_code == 400
        assert "Please use a different voucher number" in response.json()["error"]

    def test_closed_period(self, api_client, period_service, sample_accounts):
        period_service.close_period("2024-03")

        response = api_client.post("/vouchers", json=voucher_body())

        assert response.status_code == 400
        assert "closed" in response.json()["error"]

    def test_get_missing(self, api_client):
        response = api_client.get("/vouchers/missing")

        assert response.status_code == 404
        assert response.json() == {"error": "Voucher missing not found"}

    def test_status_lists_and_post(self, api_client, pending_voucher):
        assert [v["id"] for v in api_client.get("/vouchers/pending").json()] == [pending_voucher.id]

        response = api_client.put(f"/vouchers/{pending_voucher.id}", json={"status": "posted"})

        assert response.json() == {"message": "Voucher status updated"}
        assert api_client.get("/vouchers/pending").json() == []
        assert len(api_client.get("/vouchers", params={"status": "posted"}).json()) == 1
        posted = api_client.get("/vouchers/posted").json()
        assert posted[0]["lines"][0] == {"account": "1001", "side": "debit", "amount": 1000, "memo": ""}

    def test_posted_cannot_go_back(self, api_client, posted_voucher):
        response = api_client.put(f"/vouchers/{posted_voucher.id}", json={"status": "pending"})

        assert response.status_code == 400

    def test_post_batch(self, api_client, voucher_service, sample_accounts):
        ids = [
            voucher_service.create_voucher(n, date(2024, 3, 5), [debit("1001", 1), credit("6001", 1)]).id
            for n in ("B1", "B2")
        ]

        response = api_client.post("/vouchers/post-batch", json={"ids": ids})

        assert response.status_code == 200
        assert sorted(response.json()["posted"]) == sorted(ids)
        assert response.json()["alreadyPosted"] == []

    def test_post_batch_unknown_id_posts_nothing(self, api_client, pending_voucher):
        response = api_client.post("/vouchers/post-batch", json={"ids": [pending_voucher.id, "x"]})

        assert response.status_code == 404
        assert len(api_client.get("/vouchers/pending").json()) == 1


class TestLedgerApi:
    def test_account_ledger_uses_camel_case(self, api_client, posted_voucher, sample_accounts):
        rows = api_client.get(f"/ledger/{sample_accounts['1001'].id}").json()

        assert rows == [
            {
                "date": "2024-03-05",
                "voucherId": posted_voucher.id,
                "voucherNumber": "V001",
                "description": "Cash withdrawn from bank",
                "debit": 1000,
                "credit": 0,
                "runningBalance": 1000,
            }
        ]

    def test_unknown_account(self, api_client):
        assert api_client.get("/ledger/missing").status_code == 404

    def test_trial_balance(self, api_client, posted_voucher):
        body = api_client.get("/ledger/trial-balance").json()

        assert body["balanced"] is True
        assert body["totalDebit"] == body["totalCredit"] == 1000
        assert "closingBalance" in body["rows"][0]


class TestReconciliationApi:
    """Tests for bank records and reconciliation reports."""

    def _bank_record(self, api_client, amount=1000, type="income"):
        response = api_client.post(
            "/bank-records",
            json={"date": "2024-03-05", "description": "ATM", "amount": amount, "type": type},
        )
        assert response.status_code == 200
        return response.json()["id"]

    def test_match_flow(self, api_client, posted_voucher):
        record_id = self._bank_record(api_client)

        response = api_client.put(
            f"/bank-records/{record_id}/match",
            json={"matched": True, "matchedVoucherId": posted_voucher.id},
        )

        assert response.json() == {"message": "Match status updated"}
        record = api_client.get("/bank-records").json()[0]
        assert record["matched"] is True
        assert record["matched_voucher_id"] == posted_voucher.id
        assert record["type"] == "income"

        assert api_client.delete(f"/bank-records/{record_id}").status_code == 409

        api_client.put(f"/bank-records/{record_id}/match", json={"matched": False})
        assert api_client.delete(f"/bank-records/{record_id}").json() == {"message": "Bank record deleted"}

    def test_match_pending_voucher(self, api_client, pending_voucher):
        record_id = self._bank_record(api_client)

        response = api_client.put(
            f"/bank-records/{record_id}/match",
            json={"matched": True, "matchedVoucherId": pending_voucher.id},
        )

        assert response.status_code == 400

    def test_negative_amount(self, api_client):
        response = api_client.post(
            "/bank-records",
            json={"date": "2024-03-05", "description": "ATM", "amount": -1, "type": "income"},
        )

        assert response.status_code == 400

    def test_internal_check(self, api_client, posted_voucher):
        body = api_client.get("/reconciliation/internal-check").json()

        assert body == {
            "totalVouchers": 1,
            "balancedVouchers": 1,
            "unbalancedVouchers": 0,
            "issues": [],
        }

    def test_summary(self, api_client, posted_voucher):
        self._bank_record(api_client, amount=200, type="expense")

        body = api_client.get("/reconciliation/summary").json()

        assert body["matchedCount"] == 0
        assert body["unmatchedBankCount"] == 1
        assert body["unmatchedBookCount"] == 1
        assert body["bankTotal"] == -200
        assert body["bookTotal"] == 1000
        assert body["difference"] == 1200


class TestPeriodsApi:
    def test_open_check_close_reopen(self, api_client):
        response = api_client.post("/periods", json={"period": "2024-01"})
        assert response.status_code == 200

        check = api_client.get("/periods/2024-01/check").json()
        assert check["canClose"] is True
        assert check["pendingVouchers"] == 0

        closed = api_client.post("/periods/2024-01/close", json={"closedBy": "alice"}).json()
        assert closed["status"] == "closed"
        assert closed["closed_by"] == "alice"

        reopened = api_client.post("/periods/2024-01/reopen").json()
        assert reopened["status"] == "open"
        assert reopened["closed_at"] is None

    def test_close_without_body(self, api_client):
        response = api_client.post("/periods/2024-02/close")

        assert response.status_code == 200
        assert [p["period"] for p in api_client.get("/periods", params={"status": "closed"}).json()] == ["2024-02"]

    def test_close_blocked(self, api_client, pending_voucher):
        response = api_client.post("/periods/2024-03/close")

        assert response.status_code == 400
        assert "Cannot close period 2024-03" in response.json()["error"]

    def test_duplicate_period(self, api_client):
        api_client.post("/periods", json={"period": "2024-01"})

        assert api_client.post("/periods", json={"period": "2024-01"}).status_code == 409


class TestDocumentsApi:
    def test_purchase_order_workflow(self, api_client):
        response = api_client.post(
            "/purchase-orders",
            json={"orderNo": "PO-1", "date": "2024-03-01", "supplier": "Paper Co", "amount": 99.5},
        )
        order_id = response.json()["id"]

        assert api_client.put(f"/purchase-orders/{order_id}", json={"status": "completed"}).status_code == 400
        assert api_client.put(f"/purchase-orders/{order_id}", json={"status": "approved"}).status_code == 200
        assert api_client.get("/purchase-orders").json()[0]["status"] == "approved"

    def test_sales_invoice_and_expense(self, api_client):
        api_client.post(
            "/sales-invoices",
            json={"invoiceNo": "INV-1", "date": "2024-03-01", "customer": "ACME", "amount": 10},
        )
        api_client.post("/expenses", json={"date": "2024-03-01", "employee": "Bob", "amount": 5})

        assert api_client.get("/sales-invoices").json()[0]["status"] == "draft"
        assert api_client.get("/expenses").json()[0]["status"] == "pending"

    def test_missing_document(self, api_client):
        assert api_client.put("/expenses/missing", json={"status": "approved"}).status_code == 404

    def test_tax_record(self, api_client):
        response = api_client.post(
            "/tax-records", json={"period": "2024-03", "type": "vat", "taxableAmount": 1000}
        )
        record_id = response.json()["id"]

        record = api_client.get("/tax-records").json()[0]
        assert record["tax_amount"] == 130
        assert record["tax_rate"] == 13

        assert api_client.put(f"/tax-records/{record_id}", json={"status": "declared"}).status_code == 200


class TestDirectoryApi:
    def test_customer_crud(self, api_client):
        response = api_client.post("/customers", json={"name": "ACME", "email": "ap@acme.test"})
        customer_id = response.json()["id"]

        api_client.put(f"/customers/{customer_id}", json={"phone": "555-0100"})
        customer = api_client.get("/customers").json()[0]
        assert customer["phone"] == "555-0100"
        assert customer["balance"] == 0

        assert api_client.delete(f"/customers/{customer_id}").json() == {"message": "Customer deleted"}
        assert api_client.get("/customers").json() == []

    def test_employee_join_date(self, api_client):
        api_client.post("/employees", json={"name": "Bob", "joinDate": "2023-06-01", "salary": 8000})

        employee = api_client.get("/employees").json()[0]
        assert employee["join_date"] == "2023-06-01"
        assert employee["salary"] == 8000

    def test_name_required(self, api_client):
        response = api_client.post("/suppliers", json={"contact": "Ann"})

        assert response.status_code == 400

    def test_delete_missing(self, api_client):
        assert api_client.delete("/employees/missing").status_code == 404
