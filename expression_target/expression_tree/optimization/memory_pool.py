from typing import List, TYPE_CHECKING, Optional

from ...errors import BudgetExceeded

if TYPE_CHECKING:
  from ..core.node import Node, LiteralNode, BinaryOpNode


class NodeArena:
  """Per-query store that owns every node built during one search.

  Retained nodes are addressed by integer handle (their position in the
  arena). Transient nodes are counted against the budget but not stored, so
  they are released as soon as the caller drops them. The arena is torn down
  with clear() once the query is finished.
  """

  def __init__(self, max_nodes: Optional[int] = None):
    if max_nodes is not None and max_nodes < 1:
      raise ValueError(f"max_nodes must be positive, got {max_nodes}")
    self.max_nodes = max_nodes
    self._nodes: List['Node'] = []
    self.allocated = 0
    self.literal_count = 0
    self.binary_count = 0

  def new_literal(self, value: int) -> 'LiteralNode':
    from ..core.node import LiteralNode
    self._check_budget()
    node = LiteralNode(value)
    self.literal_count += 1
    return self._register(node, retain=True)

  def new_binary(self, operator: str, left: 'Node', right: 'Node',
                 retain: bool = True) -> 'BinaryOpNode':
    from ..core.node import BinaryOpNode
    self._check_budget()
    node = BinaryOpNode(operator, left, right)
    self.binary_count += 1
    return self._register(node, retain)

  def _check_budget(self):
    if self.max_nodes is not None and self.allocated >= self.max_nodes:
      raise BudgetExceeded(self.max_nodes)

  def _register(self, node: 'Node', retain: bool) -> 'Node':
    self.allocated += 1
    if retain:
      node.handle = len(self._nodes)
      self._nodes.append(node)
    return node

  def get(self, handle: int) -> 'Node':
    if handle < 0 or handle >= len(self._nodes):
      raise IndexError(f"No node with handle {handle}")
    return self._nodes[handle]

  def __len__(self) -> int:
    return len(self._nodes)

  def get_stats(self) -> dict:
    """Get arena statistics"""
    return {
      'allocated_nodes': self.allocated,
      'retained_nodes': len(self._nodes),
      'literal_nodes': self.literal_count,
      'binary_nodes': self.binary_count,
      'max_nodes': self.max_nodes
    }

  def clear(self):
    """Release all nodes and reset the budget"""
    for node in self._nodes:
      node.handle = None
    self._nodes.clear()
    self.allocated = 0
    self.literal_count = 0
    self.binary_count = 0
