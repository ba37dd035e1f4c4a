# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# tests/test_verifying_key.py

import copy
import json
from concurrent.futures import ThreadPoolExecutor

import pytest

import sigverify.verifying_key as vk_mod
from sigverify.bn254 import same_point
from sigverify.constants import GROTH16_SELECTOR, SP1_GROTH16_VK
from sigverify.verifying_key import VerifyingKey, default_verifying_key


class TestDefaultKey:
    def test_selector(self):
        assert default_verifying_key().selector == GROTH16_SELECTOR
        assert GROTH16_SELECTOR.hex() == "a4594c59"

    def test_points_are_on_curve(self):
        default_verifying_key().validate()

    def test_is_a_singleton(self):
        assert default_verifying_key() is default_verifying_key()

    def test_concurrent_first_use_builds_once(self, monkeypatch):
        monkeypatch.setattr(vk_mod, "_default_vk", None)
        with ThreadPoolExecutor(max_workers=4) as pool:
            keys = list(pool.map(lambda _: default_verifying_key(), range(8)))
        assert all(k is keys[0] for k in keys)

    def test_decimal_roundtrip(self):
        assert default_verifying_key().to_decimal() == SP1_GROTH16_VK

    def test_basis_has_two_points(self):
        assert len(default_verifying_key().public_basis) == 2


class TestFromDecimal:
    def test_g2_coordinates_are_real_part_first(self):
        vk = VerifyingKey.from_decimal(SP1_GROTH16_VK)
        x, y, _ = vk.beta_neg
        assert int(x.coeffs[0]) == int(SP1_GROTH16_VK["betaNeg"][0][0])
        assert int(x.coeffs[1]) == int(SP1_GROTH16_VK["betaNeg"][0][1])
        assert int(y.coeffs[0]) == int(SP1_GROTH16_VK["betaNeg"][1][0])
        assert int(y.coeffs[1]) == int(SP1_GROTH16_VK["betaNeg"][1][1])

    def test_off_curve_point_fails_validation(self):
        data = copy.deepcopy(SP1_GROTH16_VK)
        data["alpha"][1] = str(int(data["alpha"][1]) + 1)
        vk = VerifyingKey.from_decimal(data)
        with pytest.raises(ValueError, match="alpha"):
            vk.validate()

    def test_off_curve_g2_point_fails_validation(self):
        data = copy.deepcopy(SP1_GROTH16_VK)
        data["deltaNeg"][0][0] = str(int(data["deltaNeg"][0][0]) + 1)
        vk = VerifyingKey.from_decimal(data)
        with pytest.raises(ValueError, match="delta_neg"):
            vk.validate()

    def test_wrong_basis_size(self):
        data = copy.deepcopy(SP1_GROTH16_VK)
        data["publicBasis"] = data["publicBasis"][:1]
        with pytest.raises(ValueError, match="public basis"):
            VerifyingKey.from_decimal(data)

    def test_wrong_selector_size(self):
        data = copy.deepcopy(SP1_GROTH16_VK)
        data["selector"] = "a459"
        with pytest.raises(ValueError, match="selector"):
            VerifyingKey.from_decimal(data)

    def test_missing_field(self):
        data = copy.deepcopy(SP1_GROTH16_VK)
        del data["gammaNeg"]
        with pytest.raises(KeyError):
            VerifyingKey.from_decimal(data)


class TestJson:
    def test_roundtrip(self, tmp_path, synthetic_vk):
        path = tmp_path / "keys" / "vk.json"
        synthetic_vk.to_json(path)

        loaded = VerifyingKey.from_json(path)
        assert loaded.selector == synthetic_vk.selector
        assert same_point(loaded.alpha, synthetic_vk.alpha)
        assert same_point(loaded.delta_neg, synthetic_vk.delta_neg)
        assert all(
            same_point(p, q)
            for p, q in zip(loaded.public_basis, synthetic_vk.public_basis)
        )

    def test_file_holds_decimal_strings(self, tmp_path):
        path = tmp_path / "vk.json"
        default_verifying_key().to_json(path)
        data = json.loads(path.read_text())
        assert data["alpha"][0] == SP1_GROTH16_VK["alpha"][0]

    def test_invalid_file_is_rejected(self, tmp_path):
        data = copy.deepcopy(SP1_GROTH16_VK)
        data["constant"][0] = "1"
        path = tmp_path / "vk.json"
        path.write_text(json.dumps(data))
        with pytest.raises(ValueError, match="constant"):
            VerifyingKey.from_json(path)


if __name__ == "__main__":
    pytest.main()
