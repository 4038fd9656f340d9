"""Tests for the operation catalog and local parameter validation."""

from __future__ import annotations

import pytest

from brambl.rpc.errors import ValidationError
from brambl.rpc.operations import (
    MISSING_PARAMS,
    OPERATIONS,
    ROUTES,
    TRANSFER_POLYS,
    get_operation,
    is_present,
)

from conftest import SAMPLE_PARAMS, sample_params

WITH_REQUIRED = [op for op in OPERATIONS.values() if op.required]
WITHOUT_PARAMS = [op for op in OPERATIONS.values() if not op.takes_params]
FEE_OPERATIONS = [
    "transfer_polys",
    "transfer_arbits",
    "create_assets",
    "create_assets_prototype",
    "transfer_assets",
    "transfer_assets_prototype",
    "transfer_target_assets",
    "transfer_target_assets_prototype",
]


class TestCatalog:
    def test_every_operation_uses_a_known_route(self) -> None:
        for op in OPERATIONS.values():
            assert op.route in ROUTES

    def test_no_param_operations(self) -> None:
        assert {op.name for op in WITHOUT_PARAMS} == {
            "list_open_keyfiles",
            "get_mempool",
            "chain_info",
            "my_blocks",
            "block_generators",
            "print_chain",
        }

    def test_prototype_transfers_require_sender(self) -> None:
        assert "sender" in OPERATIONS["transfer_assets_prototype"].required
        assert "sender" in OPERATIONS["transfer_target_assets_prototype"].required
        assert "sender" not in OPERATIONS["transfer_assets"].required

    def test_calc_delay(self) -> None:
        op = OPERATIONS["calc_delay"]
        assert (op.route, op.method, op.required) == ("debug/", "delay", ("blockId", "numBlocks"))

    def test_unknown_operation(self) -> None:
        with pytest.raises(ValidationError, match="Unknown operation"):
            get_operation("mintMoney")


class TestRequiredFields:
    @pytest.mark.parametrize("op", WITH_REQUIRED, ids=lambda op: op.name)
    def test_missing_params_object(self, op) -> None:
        with pytest.raises(ValidationError) as excinfo:
            op.validate(None)
        assert str(excinfo.value) == MISSING_PARAMS
        assert excinfo.value.field is None

    @pytest.mark.parametrize("op", WITH_REQUIRED, ids=lambda op: op.name)
    def test_first_missing_field_is_named(self, op) -> None:
        params = sample_params(*op.required[1:])
        with pytest.raises(ValidationError) as excinfo:
            op.validate(params)
        assert excinfo.value.field == op.required[0]

    @pytest.mark.parametrize("op", WITH_REQUIRED, ids=lambda op: op.name)
    def test_empty_object_names_first_field(self, op) -> None:
        with pytest.raises(ValidationError) as excinfo:
            op.validate({})
        assert excinfo.value.field == op.required[0]

    @pytest.mark.parametrize("op", WITH_REQUIRED, ids=lambda op: op.name)
    def test_complete_params_pass(self, op) -> None:
        params = sample_params(*op.required)
        assert op.validate(params) == params

    def test_short_circuits_in_declared_order(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            TRANSFER_POLYS.validate({"recipient": "r", "amount": 0})
        assert excinfo.value.field == "amount"

    def test_empty_string_counts_as_missing(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            OPERATIONS["generate_keyfile"].validate({"password": ""})
        assert excinfo.value.field == "password"

    def test_non_mapping_params(self) -> None:
        with pytest.raises(ValidationError, match=MISSING_PARAMS):
            OPERATIONS["broadcast_tx"].validate(["tx"])  # type: ignore[arg-type]

    def test_extra_fields_are_forwarded(self) -> None:
        params = {**sample_params("recipient", "amount", "fee"), "data": "memo", "changeAddress": "c"}
        assert TRANSFER_POLYS.validate(params) == params

    @pytest.mark.parametrize("op", WITHOUT_PARAMS, ids=lambda op: op.name)
    def test_no_param_operations_send_empty_object(self, op) -> None:
        assert op.validate(None) == {}


class TestZeroValues:
    @pytest.mark.parametrize("name", FEE_OPERATIONS)
    def test_zero_fee_is_accepted(self, name: str) -> None:
        op = OPERATIONS[name]
        params = {**sample_params(*op.required), "fee": 0}
        assert op.validate(params)["fee"] == 0

    @pytest.mark.parametrize("name", FEE_OPERATIONS)
    def test_zero_amount_is_rejected(self, name: str) -> None:
        op = OPERATIONS[name]
        params = {**sample_params(*op.required), "amount": 0}
        with pytest.raises(ValidationError) as excinfo:
            op.validate(params)
        assert excinfo.value.field == "amount"

    @pytest.mark.parametrize("fee", [None, False, ""])
    def test_absent_fee_values_are_rejected(self, fee) -> None:
        params = {**sample_params("recipient", "amount"), "fee": fee}
        with pytest.raises(ValidationError) as excinfo:
            TRANSFER_POLYS.validate(params)
        assert excinfo.value.field == "fee"

    def test_is_present(self) -> None:
        assert is_present(0, zero_allowed=True)
        assert is_present(0.0, zero_allowed=True)
        assert not is_present(0)
        assert not is_present(False, zero_allowed=True)
        assert not is_present(None, zero_allowed=True)
        assert not is_present([])
        assert is_present("0")


class TestParamTypes:
    def test_public_keys_must_be_a_list(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            OPERATIONS["get_balances_by_key"].validate({"publicKeys": SAMPLE_PARAMS["publicKey"]})
        assert excinfo.value.field == "publicKeys"

    def test_amount_as_string_is_allowed(self) -> None:
        params = {**sample_params("recipient", "fee"), "amount": "100"}
        assert TRANSFER_POLYS.validate(params)["amount"] == "100"

    def test_tuple_public_keys_are_accepted(self) -> None:
        params = {"publicKeys": ("k1", "k2")}
        assert OPERATIONS["get_balances_by_key"].validate(params) == {"publicKeys": ["k1", "k2"]}

    def test_tuple_sender_is_accepted(self) -> None:
        op = OPERATIONS["transfer_target_assets_prototype"]
        params = {**sample_params(*op.required), "sender": ("s1",)}
        assert op.validate(params)["sender"] == ["s1"]

    def test_sender_may_be_single_key(self) -> None:
        op = OPERATIONS["transfer_assets_prototype"]
        params = {**sample_params(*op.required), "sender": SAMPLE_PARAMS["publicKey"]}
        assert op.validate(params)["sender"] == SAMPLE_PARAMS["publicKey"]

    def test_first_type_error_in_field_order(self) -> None:
        op = OPERATIONS["create_assets"]
        params = {**sample_params(*op.required), "recipient": 42, "issuer": 7}
        with pytest.raises(ValidationError) as excinfo:
            op.validate(params)
        assert excinfo.value.field == "recipient"
