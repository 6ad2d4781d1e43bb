"""Deterministic demo mind maps, used when no generator is configured.

The root gets three branches chosen by style preset. Deeper levels are added
as max_depth allows, so the same arguments always produce the same tree.
"""

from mindmap.models.document import (
    DocumentMeta,
    MindMapDocument,
    SourceType,
    StylePreset,
    TopicSource,
)
from mindmap.models.layout import LayoutConfig
from mindmap.models.semantic_tree import NodeKind, SemanticNode, SemanticTree
from mindmap.state.view_model import initialize_view_state
from mindmap.utils.identifiers import generate_document_id, utc_timestamp
from mindmap.validation.tree_validator import validate_tree

ROOT_ID = "node_1"

# (label, kind, bullets, children when deep enough); {title} is substituted
_BRANCHES: dict[StylePreset, list[tuple[str, NodeKind, list[str], list[str]]]] = {
    StylePreset.study: [
        ("Core Concepts in {title}", NodeKind.topic,
         ["Fundamental principles and foundational ideas",
          "Essential building blocks for understanding"], ["node_5", "node_6"]),
        ("Practical Examples", NodeKind.example,
         ["Real-world applications of {title}",
          "Case studies and implementation scenarios"], ["node_7"]),
        ("Key Terminology", NodeKind.definition,
         ["Important terms related to {title}", "Definitions and vocabulary"], []),
    ],
    StylePreset.executive: [
        ("Strategic Actions", NodeKind.action,
         ["Priority initiatives for {title}", "Next steps and implementation plan"], []),
        ("Risk Assessment", NodeKind.risk,
         ["Potential challenges and obstacles",
          "Mitigation strategies and contingencies"], []),
        ("Executive Summary", NodeKind.topic,
         ["High-level overview of {title}", "Key takeaways and decision points"], []),
    ],
    StylePreset.legal: [
        ("Key Provisions", NodeKind.topic,
         ["Important clauses in {title}", "Legal terms and conditions"], ["node_5"]),
        ("Risk Factors", NodeKind.risk,
         ["Liability concerns and legal exposure",
          "Compliance requirements and obligations"], []),
        ("Required Actions", NodeKind.action,
         ["Review and approval needed", "Execution and signature requirements"], []),
    ],
    StylePreset.technical: [
        ("{title} Architecture", NodeKind.topic,
         ["System design and technical approach",
          "Architectural patterns and structure"], ["node_5", "node_6"]),
        ("Implementation Details", NodeKind.detail,
         ["Technical implementation of {title}", "Code structure and components"], ["node_7"]),
        ("Technical Specifications", NodeKind.definition,
         ["Requirements and constraints", "Performance metrics and standards"], []),
    ],
}

# id -> (label, bullets, minimum depth, child)
_DETAILS: dict[str, tuple[str, list[str], int, str | None]] = {
    "node_5": ("Supporting Information",
               ["Additional context for {title}", "Background and historical perspective"],
               3, "node_8"),
    "node_6": ("Related Topics",
               ["Connected concepts and ideas", "Cross-references and dependencies"], 3, None),
    "node_7": ("Deep Dive",
               ["Detailed examination and analysis", "Comprehensive exploration"], 3, None),
    "node_8": ("Advanced Topics",
               ["Complex considerations and nuances", "Expert-level insights"], 4, "node_9"),
    "node_9": ("Granular Details",
               ["Highly specific information", "Fine-grained analysis and breakdown"], 5, None),
}


def build_mock_tree(title: str, style_preset: StylePreset, max_depth: int) -> SemanticTree:
    """Build the demo semantic tree for a title and preset."""
    nodes: dict[str, SemanticNode] = {}

    def add(node_id: str, label: str, kind: NodeKind, bullets: list[str], children: list[str]) -> None:
        nodes[node_id] = SemanticNode(
            id=node_id,
            label=label.format(title=title)[:50],
            kind=kind,
            bullets=[bullet.format(title=title) for bullet in bullets],
            children=children or None,
        )

    add(ROOT_ID, "{title}", NodeKind.topic,
        ["Overview of {title}", "Key aspects and important considerations"],
        ["node_2", "node_3", "node_4"])

    pending: list[str] = []
    for offset, (label, kind, bullets, children) in enumerate(_BRANCHES[style_preset]):
        deep_children = children if max_depth >= 3 else []
        add(f"node_{offset + 2}", label, kind, bullets, deep_children)
        pending.extend(deep_children)

    while pending:
        node_id = pending.pop(0)
        label, bullets, _, child = _DETAILS[node_id]
        children = [child] if child and max_depth >= _DETAILS[child][2] else []
        add(node_id, label, NodeKind.detail, bullets, children)
        pending.extend(children)

    return SemanticTree(root_id=ROOT_ID, nodes=nodes)


def generate_mock_document(
    title: str,
    style_preset: StylePreset = StylePreset.study,
    max_depth: int = 3,
    max_nodes: int = 20,
    config: LayoutConfig | None = None,
) -> MindMapDocument:
    """Demo document with a laid-out view state, all nodes unlocked."""
    tree = validate_tree(build_mock_tree(title, style_preset, max_depth)).raise_for_violation()
    now = utc_timestamp()
    return MindMapDocument(
        id=generate_document_id(),
        meta=DocumentMeta(
            title=title,
            style_preset=style_preset,
            created_at=now,
            updated_at=now,
            source_type=SourceType.topic,
            max_depth=max_depth,
            max_nodes=max_nodes,
        ),
        semantic=tree,
        view=initialize_view_state(tree, config),
        sources=[TopicSource(source_id="demo_1", query=title)],
    )
