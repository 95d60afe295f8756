from typing import Any, Iterator, List, Optional, Tuple
from src.avl.models.avl_node import AVLNode, create_node
from src.avl.structures.balance import get_height, update_height
from src.avl.structures.rotations import rotation
from src.avl.structures.traversal import delete_tree, in_order

# --- Operações sobre subárvores ---
# Todas recebem a raiz atual e devolvem a nova raiz: quem chama deve
# sempre reatribuir o resultado, pois rotações trocam a raiz física.

def successor(node: AVLNode) -> AVLNode:
    """Nó mais à esquerda da subárvore direita (menor chave maior que node.key)."""
    current = node.right
    if current is None:
        raise ValueError(f"Nó {node.key} não possui subárvore direita.")
    while current.left is not None:
        current = current.left
    return current


def search(node: Optional[AVLNode], key: int) -> Optional[AVLNode]:
    """Busca binária recursiva. Retorna o nó ou None. O(log n)."""
    if node is None or node.key == key:
        return node
    if node.key < key:
        return search(node.right, key)
    return search(node.left, key)


def insert(node: Optional[AVLNode], key: int, value: Any, verbose: bool = False) -> AVLNode:
    """
    Insere (key, value) e devolve a nova raiz da subárvore.
    Chave já existente: a árvore volta intacta e o valor original é mantido.
    """
    # 1. Inserção normal de BST
    if node is None:
        return create_node(key, value)

    if key < node.key:
        node.left = insert(node.left, key, value, verbose)
    elif key > node.key:
        node.right = insert(node.right, key, value, verbose)
    else:
        return node

    # 2. Na volta da recursão: altura, depois rebalanceamento
    update_height(node)
    return rotation(node, verbose)


def delete(node: Optional[AVLNode], key: int, verbose: bool = False) -> Optional[AVLNode]:
    """
    Remove a chave, se existir, e devolve a nova raiz da subárvore.
    Chave ausente não é erro: a subárvore volta inalterada.
    """
    if node is None:
        return None

    if key < node.key:
        node.left = delete(node.left, key, verbose)
    elif key > node.key:
        node.right = delete(node.right, key, verbose)
    else:
        # Zero ou um filho: o próprio nó sai da árvore
        if node.left is None:
            child = node.right
            node.right = None
            return child
        if node.right is None:
            child = node.left
            node.left = None
            return child

        # Dois filhos: copia o sucessor e remove-o da subárvore direita
        succ = successor(node)
        node.key = succ.key
        node.value = succ.value
        node.right = delete(node.right, succ.key, verbose)

    update_height(node)
    return rotation(node, verbose)


class AVLTree:
    """
    Fachada que guarda a raiz da árvore AVL.
    Garante operações de busca, inserção e remoção em O(log n)
    e reatribui a raiz após cada operação.
    """
    def __init__(self, verbose: bool = False):
        self.root: Optional[AVLNode] = None
        self.verbose = verbose
        self._size = 0

    def insert(self, key: int, value: Any) -> bool:
        """Insere um novo nó. Retorna False se a chave já existia (sem sobrescrever)."""
        if search(self.root, key) is not None:
            if self.verbose:
                print(f"[AVL] Chave {key} já existe, inserção ignorada.")
            return False
        self.root = insert(self.root, key, value, self.verbose)
        self._size += 1
        return True

    def delete(self, key: int) -> bool:
        """Remove a chave. Retorna False se ela não estava na árvore."""
        if search(self.root, key) is None:
            if self.verbose:
                print(f"[AVL] Chave {key} não encontrada, nada a remover.")
            return False
        self.root = delete(self.root, key, self.verbose)
        self._size -= 1
        return True

    def search(self, key: int) -> Optional[Any]:
        """Busca pelo valor associado à chave. Retorna None se não existir."""
        node = search(self.root, key)
        return node.value if node else None

    def get_node(self, key: int) -> Optional[AVLNode]:
        return search(self.root, key)

    def __contains__(self, key: int) -> bool:
        return search(self.root, key) is not None

    def __len__(self):
        return self._size

    @property
    def height(self) -> int:
        return get_height(self.root)

    def min_key(self) -> Optional[int]:
        node = self.root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.key

    def max_key(self) -> Optional[int]:
        node = self.root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.key

    def keys(self) -> List[int]:
        return [node.key for node in in_order(self.root)]

    def items(self) -> Iterator[Tuple[int, Any]]:
        for node in in_order(self.root):
            yield node.key, node.value

    def get_all_values(self) -> List[Any]:
        """Retorna todos os valores (in-order traversal) para debug."""
        return [node.value for node in in_order(self.root)]

    def clear(self) -> int:
        """Libera todos os nós. Retorna quantos foram liberados."""
        released = delete_tree(self.root)
        self.root = None
        self._size = 0
        return released

    def __repr__(self):
        root_key = self.root.key if self.root else None
        return f"AVLTree(size={self._size}, height={self.height}, root={root_key})"
