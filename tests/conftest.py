"""Shared fixtures for dmnex tests."""

from __future__ import annotations

import pytest

from dmnex.engine.catalog import TypeCatalog
from dmnex.engine.types import FieldRef, TypeDefinition
from dmnex.settings import Settings


LOAN_DMN = """<?xml version="1.0" encoding="UTF-8"?>
<dmn:definitions xmlns:dmn="https://www.omg.org/spec/DMN/20191111/MODEL/"
                 id="loan" name="Loan Approval" namespace="https://example.com/loan">
  <dmn:itemDefinition name="Person">
    <dmn:itemComponent name="name"/>
    <dmn:itemComponent name="age">
      <dmn:typeRef>Number</dmn:typeRef>
    </dmn:itemComponent>
  </dmn:itemDefinition>
  <dmn:itemDefinition name="Number">
    <dmn:typeRef>number</dmn:typeRef>
  </dmn:itemDefinition>
  <dmn:itemDefinition name="Status">
    <dmn:typeRef>string</dmn:typeRef>
    <dmn:allowedValues>
      <dmn:text>"Active","Inactive"</dmn:text>
    </dmn:allowedValues>
  </dmn:itemDefinition>
  <dmn:inputData id="i_applicant" name="Applicant">
    <dmn:variable id="v_applicant" name="Applicant" typeRef="Person"/>
  </dmn:inputData>
  <dmn:inputData id="i_status" name="Account Status">
    <dmn:variable id="v_status" name="Account Status" typeRef="Status"/>
  </dmn:inputData>
  <dmn:inputData id="i_amount" name="Amount">
    <dmn:variable id="v_amount" name="Amount" typeRef="Currency"/>
  </dmn:inputData>
</dmn:definitions>
"""

LOAN_EXAMPLES = {
    "Applicant": {"name": "example_string", "age": 0},
    "Account Status": "Active",
    "Amount": "example_currency",
}


@pytest.fixture
def settings() -> Settings:
    return Settings(file_extension=".dmn", attribute_prefix="_", text_key="_text", json_indent=2)


@pytest.fixture
def loan_dmn() -> str:
    return LOAN_DMN


@pytest.fixture
def loan_examples() -> dict:
    return dict(LOAN_EXAMPLES)


@pytest.fixture
def person_catalog() -> TypeCatalog:
    return TypeCatalog.build([
        TypeDefinition(
            name="Person",
            fields=(FieldRef("name"), FieldRef("age", "Number")),
        ),
        TypeDefinition(name="Number", base_type="number"),
        TypeDefinition(name="Status", allowed_values=('"Active" "Inactive"',), base_type="string"),
    ])
