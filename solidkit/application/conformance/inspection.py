"""
Static inspection of contracts, variants and consumers.

These checks read class source with ``ast`` and report the design pitfalls
the lessons illustrate:

- no-op-operation: a variant satisfies an operation with a body that does
  nothing (pass, ..., bare return, return None)
- self-construction: a class instantiates a capability variant itself, or
  builds a collaborator of its own in __init__
- type-branching: a class inspects the concrete capability type it holds
- tag-branching: a class selects behaviour with an if/elif chain over
  string tags
- mixed-responsibilities: one method validates, constructs, presents and
  stores at the same time
"""
import ast
import inspect
import sys
import textwrap
from dataclasses import asdict, dataclass, is_dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Set, Type

from pydantic import BaseModel

from solidkit.domain.base.capability import Capability
from solidkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

RULE_NO_OP = "no-op-operation"
RULE_SELF_CONSTRUCTION = "self-construction"
RULE_TYPE_BRANCHING = "type-branching"
RULE_TAG_BRANCHING = "tag-branching"
RULE_MIXED_RESPONSIBILITIES = "mixed-responsibilities"

MAX_CONCERNS_PER_METHOD = 2
STORAGE_METHODS = {"append", "extend", "add", "update", "insert", "setdefault"}
VALUE_MODULES = {"builtins", "decimal", "fractions", "datetime", "collections", "pathlib"}


@dataclass(frozen=True)
class Violation:
    """A design rule broken by a class."""
    subject: str
    rule: str
    detail: str
    principle: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _subject_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _parse_source(obj: Any) -> Optional[ast.AST]:
    """Parse the source of a class or function, None if it is unavailable."""
    try:
        source = inspect.getsource(obj)
    except (OSError, TypeError) as e:
        logger.warning(f"Could not read source of {obj!r}: {e}")
        return None
    return ast.parse(textwrap.dedent(source))


def _strip_docstring(body: List[ast.stmt]) -> List[ast.stmt]:
    if body and isinstance(body[0], ast.Expr) and isinstance(body[0].value, ast.Constant) \
            and isinstance(body[0].value.value, str):
        return body[1:]
    return body


def _is_empty_statement(node: ast.stmt) -> bool:
    if isinstance(node, ast.Pass):
        return True
    if isinstance(node, ast.Expr) and isinstance(node.value, ast.Constant) \
            and node.value.value is Ellipsis:
        return True
    if isinstance(node, ast.Return):
        return node.value is None or (
            isinstance(node.value, ast.Constant) and node.value.value is None
        )
    return False


def find_no_op_operations(variant_cls: Type[Capability],
                          principle: Optional[str] = None) -> List[Violation]:
    """
    Find contract operations a variant satisfies with a body that does nothing.

    Args:
        variant_cls: Concrete capability class to inspect
        principle: Principle to attach to reported violations

    Returns:
        One violation per no-op operation
    """
    violations = []

    for operation in variant_cls.operations():
        implementation = getattr(variant_cls, operation, None)
        if implementation is None or getattr(implementation, "__isabstractmethod__", False):
            violations.append(Violation(
                _subject_name(variant_cls), RULE_NO_OP,
                f"{operation} is not implemented", principle,
            ))
            continue

        tree = _parse_source(implementation)
        if tree is None:
            continue

        function = next(
            node for node in ast.walk(tree)
            if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))
        )
        body = _strip_docstring(function.body)
        if all(_is_empty_statement(statement) for statement in body):
            violations.append(Violation(
                _subject_name(variant_cls), RULE_NO_OP,
                f"{operation} does nothing for {variant_cls.__name__}", principle,
            ))

    return violations


class _NameResolver:
    """Resolves names and dotted attributes against a module's globals."""

    def __init__(self, cls: type):
        module = sys.modules.get(cls.__module__)
        self.namespace = dict(vars(module)) if module else {}

    def resolve(self, node: ast.AST) -> Any:
        if isinstance(node, ast.Name):
            return self.namespace.get(node.id)
        if isinstance(node, ast.Attribute):
            owner = self.resolve(node.value)
            return getattr(owner, node.attr, None) if owner is not None else None
        return None

    def capability_classes(self, node: ast.AST) -> List[type]:
        if isinstance(node, ast.Tuple):
            found = []
            for element in node.elts:
                found.extend(self.capability_classes(element))
            return found
        resolved = self.resolve(node)
        if isinstance(resolved, type) and issubclass(resolved, Capability):
            return [resolved]
        return []


def _string_tag(test: ast.AST) -> Optional[str]:
    """Return the string literal an if-test compares against with ==, if any."""
    if isinstance(test, ast.Compare) and len(test.ops) == 1 and isinstance(test.ops[0], ast.Eq):
        for side in (test.left, test.comparators[0]):
            if isinstance(side, ast.Constant) and isinstance(side.value, str):
                return side.value
    return None


def _tag_chain(node: ast.If) -> List[str]:
    tags = []
    current: Optional[ast.stmt] = node
    while isinstance(current, ast.If):
        tag = _string_tag(current.test)
        if tag is None:
            break
        tags.append(tag)
        current = current.orelse[0] if len(current.orelse) == 1 else None
    return tags


def _is_value_type(cls: type) -> bool:
    return (
        cls.__module__ in VALUE_MODULES
        or issubclass(cls, (BaseException, Enum, BaseModel))
        or is_dataclass(cls)
    )


def _self_attribute(target: ast.AST) -> Optional[str]:
    if isinstance(target, ast.Attribute) and isinstance(target.value, ast.Name) \
            and target.value.id == "self":
        return target.attr
    return None


def _constructed_collaborators(class_node: ast.ClassDef, resolver: _NameResolver) -> List[type]:
    """Classes that __init__ instantiates directly into attributes of self."""
    init = next((
        node for node in class_node.body
        if isinstance(node, ast.FunctionDef) and node.name == "__init__"
    ), None)
    if init is None:
        return []

    collaborators = []
    for node in ast.walk(init):
        if isinstance(node, ast.Assign):
            targets, value = node.targets, node.value
        elif isinstance(node, ast.AnnAssign) and node.value is not None:
            targets, value = [node.target], node.value
        else:
            continue
        if not isinstance(value, ast.Call) or not any(_self_attribute(t) for t in targets):
            continue
        constructed = resolver.resolve(value.func)
        # capability classes are reported by the general call scan
        if isinstance(constructed, type) and not issubclass(constructed, Capability) \
                and not _is_value_type(constructed):
            collaborators.append(constructed)
    return collaborators


def find_self_construction(consumer_cls: type,
                           principle: Optional[str] = None) -> List[Violation]:
    """
    Find places where a class picks or builds its own capability variant.

    Args:
        consumer_cls: Class to inspect
        principle: Principle to attach to reported violations

    Returns:
        Violations for capability instantiation, collaborators built in
        __init__, checks on the concrete capability type and if/elif chains
        over string tags
    """
    tree = _parse_source(consumer_cls)
    if tree is None:
        return []

    resolver = _NameResolver(consumer_cls)
    subject = _subject_name(consumer_cls)
    violations = []
    chained: Set[int] = set()

    for node in ast.walk(tree):
        if isinstance(node, ast.Call):
            constructed = resolver.capability_classes(node.func)
            for capability in constructed:
                violations.append(Violation(
                    subject, RULE_SELF_CONSTRUCTION,
                    f"constructs {capability.__name__} itself", principle,
                ))

            if isinstance(node.func, ast.Name) and node.func.id in ("isinstance", "issubclass") \
                    and len(node.args) == 2:
                for capability in resolver.capability_classes(node.args[1]):
                    violations.append(Violation(
                        subject, RULE_TYPE_BRANCHING,
                        f"checks for concrete type {capability.__name__}", principle,
                    ))

        elif isinstance(node, ast.Compare) and isinstance(node.left, ast.Call) \
                and isinstance(node.left.func, ast.Name) and node.left.func.id == "type":
            for comparator in node.comparators:
                for capability in resolver.capability_classes(comparator):
                    violations.append(Violation(
                        subject, RULE_TYPE_BRANCHING,
                        f"compares type() with {capability.__name__}", principle,
                    ))

        elif isinstance(node, ast.If) and id(node) not in chained:
            tags = _tag_chain(node)
            current: Any = node
            for _ in tags:
                chained.add(id(current))
                current = current.orelse[0] if current.orelse else None
            if len(tags) >= 2:
                violations.append(Violation(
                    subject, RULE_TAG_BRANCHING,
                    f"selects behaviour by tag: {', '.join(tags)}", principle,
                ))

    class_node = next((node for node in ast.walk(tree) if isinstance(node, ast.ClassDef)), None)
    if class_node is not None:
        for collaborator in _constructed_collaborators(class_node, resolver):
            violations.append(Violation(
                subject, RULE_SELF_CONSTRUCTION,
                f"constructs {collaborator.__name__} itself", principle,
            ))

    return violations


def _method_concerns(function: ast.AST, resolver: _NameResolver) -> Set[str]:
    concerns = set()

    for node in ast.walk(function):
        if isinstance(node, ast.Raise):
            concerns.add("validation")

        elif isinstance(node, ast.Call):
            target = resolver.resolve(node.func)
            if isinstance(target, type) and not issubclass(target, BaseException):
                concerns.add("construction")
            if isinstance(node.func, ast.Attribute) and node.func.attr in STORAGE_METHODS \
                    and isinstance(node.func.value, ast.Attribute) \
                    and isinstance(node.func.value.value, ast.Name) \
                    and node.func.value.value.id == "self":
                concerns.add("storage")

        elif isinstance(node, (ast.Assign, ast.Return)) and isinstance(node.value, ast.JoinedStr):
            concerns.add("presentation")

        elif isinstance(node, ast.Assign):
            for target in node.targets:
                if isinstance(target, ast.Subscript) and isinstance(target.value, ast.Attribute) \
                        and isinstance(target.value.value, ast.Name) and target.value.value.id == "self":
                    concerns.add("storage")

    return concerns


def find_mixed_responsibilities(cls: type,
                                principle: Optional[str] = None) -> List[Violation]:
    """
    Find methods that take on more than one job.

    A method is reported when it mixes more than MAX_CONCERNS_PER_METHOD of
    validation, construction, presentation and storage.
    """
    tree = _parse_source(cls)
    if tree is None:
        return []

    resolver = _NameResolver(cls)
    class_node = next(node for node in ast.walk(tree) if isinstance(node, ast.ClassDef))
    violations = []

    for node in class_node.body:
        if not isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
            continue
        concerns = _method_concerns(node, resolver)
        if len(concerns) > MAX_CONCERNS_PER_METHOD:
            violations.append(Violation(
                _subject_name(cls), RULE_MIXED_RESPONSIBILITIES,
                f"{node.name} handles {', '.join(sorted(concerns))}", principle,
            ))

    return violations
