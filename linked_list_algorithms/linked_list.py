# Mutable singly linked list the user edits in live mode.
# Algorithms never touch it directly: they work on an immutable snapshot
# taken with `snapshot()`.

from .steps import Node, new_node


class ListNode:
    def __init__(self, val, node_id=None):
        node = new_node(val)
        self.id = node_id if node_id is not None else node.id
        self.val = node.value
        self.next = None


class LinkedList:
    def __init__(self, values=()):
        self.head = None
        self.size = 0
        for v in values:
            self.append(v)

    def __len__(self):
        return self.size

    def __iter__(self):
        p = self.head
        while p is not None:
            yield p.val
            p = p.next

    def _node_at(self, index):
        p = self.head
        for _ in range(index):
            p = p.next
        return p

    # Add a node to the end of the list
    def append(self, value):
        node = ListNode(value)
        if self.head is None:
            self.head = node
        else:
            self._node_at(self.size - 1).next = node
        self.size += 1

    # Add a node to the beginning of the list
    def prepend(self, value):
        node = ListNode(value)
        node.next = self.head
        self.head = node
        self.size += 1

    def insert_at(self, index, value):
        if index < 0 or index > self.size:
            raise IndexError(f"insert index {index} outside [0, {self.size}]")
        if index == 0:
            self.prepend(value)
            return
        prev = self._node_at(index - 1)
        node = ListNode(value)
        node.next = prev.next
        prev.next = node
        self.size += 1

    # Delete the first node holding `value`
    def delete(self, value):
        value = str(value)
        prev = None
        p = self.head
        while p is not None and p.val != value:
            prev = p
            p = p.next
        if p is None:
            return False
        if prev is None:
            self.head = p.next
        else:
            prev.next = p.next
        self.size -= 1
        return True

    def delete_at(self, index):
        if index < 0 or index >= self.size:
            raise IndexError(f"delete index {index} outside [0, {self.size - 1}]")
        if index == 0:
            removed = self.head
            self.head = removed.next
        else:
            prev = self._node_at(index - 1)
            removed = prev.next
            prev.next = removed.next
        self.size -= 1
        return removed.val

    def find_index(self, value):
        value = str(value)
        for i, v in enumerate(self):
            if v == value:
                return i
        return -1

    def snapshot(self):
        """Current contents as Nodes, head first. Ids are stable per node."""
        nodes = []
        p = self.head
        while p is not None:
            nodes.append(Node(id=p.id, value=p.val))
            p = p.next
        return nodes

    to_array = snapshot

    @classmethod
    def from_nodes(cls, nodes):
        """Rebuild a list from a step's nodes, keeping their ids."""
        lst = cls()
        tail = None
        for n in nodes:
            node = ListNode(n.value, node_id=n.id)
            if tail is None:
                lst.head = node
            else:
                tail.next = node
            tail = node
            lst.size += 1
        return lst
