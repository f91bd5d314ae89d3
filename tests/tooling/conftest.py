"""Shared fixtures for tooling tests."""

from __future__ import annotations

from pathlib import Path

import pytest

OPENAPI_YAML = """
openapi: 3.0.0
info:
  title: Swagger Petstore
  version: 1.0.0
paths:
  /pets/{petId}:
    get:
      operationId: showPetById
      parameters:
        - name: petId
          in: path
          required: true
          schema:
            type: string
"""

JOB_YAML = """
title: Swagger Petstore
openapi: petstore.yaml
output:
  schemas: ./model
operations:
  - route: /pets/${petId}
    path_route: /pets/{petId}
    verb: GET
    operation_name: showPetById
    response:
      imports:
        - name: Pet
      definition:
        success: Pet
    props:
      - name: petId
        definition: "petId: string"
        implementation: "petId: string"
"""


@pytest.fixture
def job_dir(tmp_path: Path) -> Path:
    """Directory holding a petstore document and a job pointing at it."""
    (tmp_path / "petstore.yaml").write_text(OPENAPI_YAML)
    (tmp_path / "job.yaml").write_text(JOB_YAML)
    return tmp_path


@pytest.fixture
def job_file(job_dir: Path) -> Path:
    """The job file inside job_dir."""
    return job_dir / "job.yaml"
