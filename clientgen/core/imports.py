"""Import lists and dependency import statements."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

from clientgen.spec.output import TsConfig
from clientgen.spec.verbs import GeneratorImport, GeneratorMutator, GeneratorVerbOptions


class GeneratorDependency(BaseModel):
    """An external package and the symbols it may provide to generated code."""

    exports: list[GeneratorImport] = Field(default_factory=list)
    dependency: str

    model_config = {"extra": "forbid"}


def generate_verb_imports(verb_options: GeneratorVerbOptions) -> list[GeneratorImport]:
    """Collect the model imports one operation needs."""
    imports: list[GeneratorImport] = []
    if not verb_options.response.is_blob:
        imports.extend(verb_options.response.imports)
    imports.extend(verb_options.body.imports)

    named_path_params = verb_options.named_path_params
    if named_path_params and named_path_params.schema_ref:
        imports.append(GeneratorImport(name=named_path_params.schema_ref.name))
    if verb_options.query_params:
        imports.append(GeneratorImport(name=verb_options.query_params.schema_ref.name))
    if verb_options.headers:
        imports.append(GeneratorImport(name=verb_options.headers.schema_ref.name))
    for param in verb_options.params:
        imports.extend(param.imports)

    return imports


def is_synthetic_default_imports_allow(tsconfig: TsConfig | None) -> bool:
    """Whether ``import x from 'pkg'`` works for CommonJS packages."""
    if tsconfig is None:
        return True
    options = tsconfig.compiler_options
    if options is None:
        return False
    if options.allow_synthetic_default_imports is not None:
        return options.allow_synthetic_default_imports
    return bool(options.es_module_interop)


def dedupe_imports(imports: list[GeneratorImport]) -> list[GeneratorImport]:
    """Drop repeated imports (same name and alias), keeping the first one."""
    seen: set[tuple[str, str | None]] = set()
    result = []
    for item in imports:
        key = (item.name, item.alias)
        if key in seen:
            continue
        seen.add(key)
        result.append(item)
    return result


def _is_referenced(name: str, code: str) -> bool:
    return re.search(rf"(?<![\w$]){re.escape(name)}(?![\w$])", code) is not None


def _import_name(item: GeneratorImport) -> str:
    return f"{item.name} as {item.alias}" if item.alias else item.name


def generate_dependency_imports(
    dependencies: list[GeneratorDependency],
    code: str,
    *,
    is_synthetic_default_imports_allowed: bool = True,
) -> list[str]:
    """Render import statements for the dependency exports referenced in ``code``."""
    lines = []
    for dependency in dependencies:
        used = [
            item for item in dependency.exports if _is_referenced(item.alias or item.name, code)
        ]
        if not used:
            continue

        default = next((item for item in used if item.default), None)
        values = [item for item in used if not item.default and item.values]
        types = [item for item in used if not item.default and not item.values]
        package = dependency.dependency

        if default:
            if default.synthetic_default_import and not is_synthetic_default_imports_allowed:
                lines.append(f"import * as {default.name} from '{package}';")
            else:
                lines.append(f"import {default.name} from '{package}';")
        if values:
            names = ", ".join(_import_name(item) for item in values)
            lines.append(f"import {{ {names} }} from '{package}';")
        if types:
            names = ", ".join(_import_name(item) for item in types)
            lines.append(f"import type {{ {names} }} from '{package}';")
    return lines


def generate_model_imports(imports: list[GeneratorImport], schemas_path: str) -> list[str]:
    """Render the type import of generated model types."""
    names = [_import_name(item) for item in dedupe_imports(imports)]
    if not names:
        return []
    return [f"import type {{ {', '.join(names)} }} from '{schemas_path}';"]


def generate_mutator_imports(mutators: list[GeneratorMutator]) -> list[str]:
    """Render one import per distinct custom request function."""
    lines = []
    seen: set[str] = set()
    for mutator in mutators:
        if mutator.name in seen or not mutator.path:
            continue
        seen.add(mutator.name)
        if mutator.default:
            lines.append(f"import {mutator.name} from '{mutator.path}';")
        else:
            lines.append(f"import {{ {mutator.name} }} from '{mutator.path}';")
    return lines
