"""Iterative tree traversal, so that long operator chains never hit the recursion limit."""


def postvisitor(expr, fn, **kwargs):
  '''Visit an expression tree in postorder applying a function to every node.

  Parameters
  ----------
  expr: Node
      The root of the tree to be visited.
  fn: function(node, *o, **kwargs)
      A function applied at each node. It takes the node as its first
      argument and the results of visiting its children (left before
      right) as further positional arguments.
  **kwargs:
      Any additional keyword arguments to be passed to fn.

  Returns
  -------
  The result of applying fn to the root and its visited children.
  '''
  results = {}
  stack = [(expr, False)]

  while stack:
    node, processed = stack.pop()
    if processed:
      child_results = tuple(results[id(c)] for c in node.children())
      results[id(node)] = fn(node, *child_results, **kwargs)
    else:
      stack.append((node, True))
      # Reversed so that the left child is finished first
      for child in reversed(node.children()):
        stack.append((child, False))

  return results[id(expr)]
