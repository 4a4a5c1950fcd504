"""
Render a pipeline configuration and parameter list into azure-pipelines.yml text.

Generation is plain string composition: sections are built in a fixed order,
empty ones are dropped and the rest are joined by a blank line.
"""

from typing import Iterable, List, Sequence

from customizer.src.models.parameter import ParameterDefinition, ParameterType
from customizer.src.models.pipeline import PipelineConfig

RESOURCES_SECTION = (
    "resources:\n"
    "  repositories:\n"
    "    - repository: cicd-templates\n"
    "      type: github\n"
    "      name: kendedc/test-cicd-template\n"
    "      ref: refs/heads/main\n"
    "      endpoint: kendedc"
)

BUILD_AND_DEPLOY_STAGES = (
    "- stage: Build\n"
    "  displayName: \"Build Stage\"\n"
    "  jobs:\n"
    "  - job: InstallNode\n"
    "    displayName: \"Install Node Job\"\n"
    "    steps:\n"
    "    - template: install-node.yml@cicd-templates\n"
    "      parameters:\n"
    "        nodeVersion: ${{ parameters.nodeVersion }}\n"
    "  - job: Build\n"
    "    displayName: \"Build Job\"\n"
    "    dependsOn: InstallNode\n"
    "    steps:\n"
    "    - template: ci-steps.yml@cicd-templates\n"
    "\n"
    "- stage: Deploy\n"
    "  displayName: \"Deploy Stage\"\n"
    "  dependsOn: Build\n"
    "  condition: and(succeeded(), ne(variables['Build.Reason'], 'PullRequest'))\n"
    "  jobs:\n"
    "  - job: Deploy\n"
    "    displayName: \"Deploy Job\"\n"
    "    steps:\n"
    "    - template: cd-steps.yml@cicd-templates"
)

STAGES = (BUILD_AND_DEPLOY_STAGES,)

NO_OP_STEPS = (
    "steps:\n"
    "- script: echo 'No build steps selected'\n"
    "  displayName: 'No-op'"
)

def escape_quotes(value: str) -> str:
    return value.replace('"', '\\"')

def parse_trigger_branches(raw: str) -> List[str]:
    """Split comma separated branches, keeping order and duplicates."""
    return [branch.strip() for branch in raw.split(",") if branch.strip()]

def format_default(param: ParameterDefinition) -> str:
    text = param.default.as_text()
    if param.type == ParameterType.STRING:
        return f'"{escape_quotes(text)}"'
    return text

def build_trigger_section(raw_branches: str) -> str:
    branches = parse_trigger_branches(raw_branches)
    if not branches:
        return ""
    lines = ["trigger:", "  branches:", "    include:"]
    lines.extend(f"      - {branch}" for branch in branches)
    return "\n".join(lines)

def build_variables_section(project_name: str) -> str:
    return f"variables:\n- group: {project_name}-variable-group"

def build_parameters_section(parameters: Sequence[ParameterDefinition]) -> str:
    if not parameters:
        return ""
    lines = ["parameters:"]
    for param in parameters:
        lines.append(f"- name: {param.name}")
        lines.append(f"  type: {param.type.value}")
        lines.append(f"  default: {format_default(param)}")
    return "\n".join(lines)

def build_pool_section(config: PipelineConfig) -> str:
    return f"pool:\n  vmImage: {config.vm_image.value}"

def build_stages_section(stages: Sequence[str] = STAGES) -> str:
    if not stages:
        return NO_OP_STEPS
    return "stages:\n" + "\n".join(stages)

def join_sections(sections: Iterable[str]) -> str:
    return "\n\n".join(section for section in sections if section)

def render_document(config: PipelineConfig, parameters: Iterable[ParameterDefinition]) -> str:
    """
    Render the full pipeline document from a config/parameters snapshot.
    Pure: the same inputs always give the same text.
    """
    params = tuple(parameters)
    return join_sections([
        f"name: {config.project_name}",
        build_trigger_section(config.trigger_branches),
        RESOURCES_SECTION,
        build_variables_section(config.project_name),
        build_parameters_section(params),
        build_pool_section(config),
        "",
        build_stages_section(),
    ])
