# Path: rosetta_verify/process/grouping/operation_grouper.py
"""
Operation Grouper

Merges operations linked through related_operations into transfer groups.

Operations are processed in index order:
1. An operation without related_operations opens a new group, keyed by
   an incrementing counter.
2. An operation with related_operations collects the distinct group keys
   currently assigned to the referenced indices. The smallest key is the
   merge target: the operation joins it, then every other collected group
   is moved into it member by member and discarded.
3. Surviving groups are emitted in ascending key order, members sorted
   by index.

Group membership is tracked with a per-index assignment list rather than
a disjoint-set structure. The merge target is always the smallest key.

Related-operation policy:
    A reference to an index that has not been processed yet resolves to
    the default assignment (group 0), as Rosetta implementations do, and
    is logged as a warning. With strict_related_operations=True such a
    reference raises ParserError instead. A reference outside the
    transaction always raises ParserError.
"""

from ...constants import DEFAULT_GROUP_KEY, EMPTY_GROUP_TYPE
from ...core.errors import ParserError
from ...core.logger.ipo_logging import get_process_logger
from ...models.results import OperationGroup
from ...models.rosetta import Operation, Transaction
from ...tools.hashing import structural_hash


class OperationGrouper:
    """
    Clusters the operations of a transaction into OperationGroups.

    Example:
        grouper = OperationGrouper()
        groups = grouper.group_operations(transaction)
        for group in groups:
            print(group.type, group.indices)
    """

    def __init__(self, strict_related_operations: bool = False):
        """
        Initialize grouper.

        Args:
            strict_related_operations: Reject references to operations
                that have not been assigned a group yet
        """
        self.logger = get_process_logger('grouping')
        self.strict_related_operations = strict_related_operations

    def group_operations(self, transaction: Transaction) -> list[OperationGroup]:
        """
        Group the operations of a transaction.

        Args:
            transaction: Schema-valid transaction; operation indices must
                equal their position

        Returns:
            Groups in ascending key order, members sorted by index

        Raises:
            ParserError: On an index that does not match its position, or
                a related operation that cannot be resolved
        """
        ops = transaction.operations or []
        groups: dict[int, OperationGroup] = {}
        assignments = [DEFAULT_GROUP_KEY] * len(ops)
        assigned = [False] * len(ops)
        counter = 0

        for position, op in enumerate(ops):
            if op.index != position:
                raise ParserError(
                    f'operation at position {position} has index {op.index}'
                )

            if not op.related_operations:
                key = counter
                counter += 1
                groups[key] = self._new_group(op)
                assignments[op.index] = key
                assigned[op.index] = True
                continue

            keys = self._groups_to_merge(op, assignments, assigned)
            target_key = keys[0]
            target = groups.get(target_key)

            if target is None:
                raise ParserError(
                    f'operation {op.index} resolves to group {target_key} which does not exist'
                )

            self._add_operation_to_group(target, target_key, assignments, op)
            assigned[op.index] = True

            for other_key in keys[1:]:
                other = groups.pop(other_key)
                for other_op in other.operations:
                    self._add_operation_to_group(target, target_key, assignments, other_op)
                self.logger.debug(f"Merged group {other_key} into group {target_key}")

        result = self._sort_groups(groups)
        self.logger.debug(
            f"Grouped {len(ops)} operations into {len(result)} groups"
        )
        return result

    def _new_group(self, op: Operation) -> OperationGroup:
        """Open a singleton group for an operation without relations."""
        return OperationGroup(
            type=op.type,
            operations=[op],
            currencies=[op.amount.currency] if op.amount is not None else [],
            nil_amount_present=op.amount is None,
        )

    def _groups_to_merge(
        self,
        op: Operation,
        assignments: list[int],
        assigned: list[bool],
    ) -> list[int]:
        """Distinct group keys of the referenced operations, ascending."""
        keys: list[int] = []

        for related in op.related_operations:
            index = related.index
            if index < 0 or index >= len(assignments):
                raise ParserError(
                    f'operation {op.index} references operation {index} '
                    f'outside the transaction'
                )

            if not assigned[index]:
                if self.strict_related_operations:
                    raise ParserError(
                        f'operation {op.index} references operation {index} '
                        f'which has not been grouped yet'
                    )
                self.logger.warning(
                    f"Operation {op.index} references unprocessed operation {index}; "
                    f"using group {DEFAULT_GROUP_KEY}"
                )

            key = assignments[index]
            if key not in keys:
                keys.append(key)

        keys.sort()
        return keys

    def _add_operation_to_group(
        self,
        group: OperationGroup,
        group_key: int,
        assignments: list[int],
        op: Operation,
    ) -> None:
        """
        Add an operation to a group and record its assignment.

        nil_amount_present reflects only the operation just added.
        """
        if op.type != group.type and group.type != EMPTY_GROUP_TYPE:
            group.type = EMPTY_GROUP_TYPE

        group.operations.append(op)
        assignments[op.index] = group_key

        if op.amount is None:
            group.nil_amount_present = True
            return

        group.nil_amount_present = False

        currency_hash = structural_hash(op.amount.currency)
        if not any(structural_hash(c) == currency_hash for c in group.currencies):
            group.currencies.append(op.amount.currency)

    def _sort_groups(self, groups: dict[int, OperationGroup]) -> list[OperationGroup]:
        """Emit groups by ascending key with members sorted by index."""
        result = []
        for key in sorted(groups):
            group = groups[key]
            group.operations.sort(key=lambda o: o.index)
            result.append(group)
        return result


def group_operations(
    transaction: Transaction,
    strict_related_operations: bool = False,
) -> list[OperationGroup]:
    """Group the operations of a transaction with a one-off grouper."""
    return OperationGrouper(strict_related_operations).group_operations(transaction)


__all__ = ['OperationGrouper', 'group_operations']
