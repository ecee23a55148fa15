"""
Chainable in-memory collection for filtering and ordering departures.

Each filtering operation returns a new collection, so queries can be
composed without touching the underlying departure board.
"""

from typing import TypeVar, Generic, Callable, List, Dict, Optional, Any, Iterable, Union

T = TypeVar('T')


class QueryableCollection(Generic[T]):
    """
    A small chainable collection over a list of items.

    Examples:
        collection.filter(lambda f: f.terminal == '4').all()
        collection.where(airline='Delta Air Lines').first()
        collection.order_by(lambda f: f.flight_name).take(5).all()
    """

    def __init__(self, items: Union[List[T], Iterable[T]]):
        self._items: List[T] = list(items)

    def filter(self, predicate: Callable[[T], bool]) -> 'QueryableCollection[T]':
        """
        Keep items for which predicate returns True.

        Args:
            predicate: Function that takes an item and returns True to keep it

        Returns:
            New collection of the same type with the kept items
        """
        return self.__class__([item for item in self._items if predicate(item)])

    def where(self, **kwargs) -> 'QueryableCollection[T]':
        """
        Keep items whose attributes equal all the given values.

        Examples:
            flights.where(airline='JetBlue Airways', terminal='5')
        """
        def matches(item: T) -> bool:
            return all(getattr(item, key, None) == value for key, value in kwargs.items())
        return self.filter(matches)

    def first(self) -> Optional[T]:
        """Return the first item or None if the collection is empty."""
        return self._items[0] if self._items else None

    def all(self) -> List[T]:
        """Return the items as a list."""
        return list(self._items)

    def count(self) -> int:
        return len(self._items)

    def exists(self) -> bool:
        return len(self._items) > 0

    def order_by(self, key_func: Callable[[T], Any], reverse: bool = False) -> 'QueryableCollection[T]':
        """
        Sort items by a key function.

        Args:
            key_func: Function that returns a sort key for each item
            reverse: If True, sort in descending order

        Returns:
            New collection with sorted items
        """
        return self.__class__(sorted(self._items, key=key_func, reverse=reverse))

    def take(self, n: int) -> 'QueryableCollection[T]':
        """Return a new collection with the first n items."""
        return self.__class__(self._items[:n])

    def group_by(self, key_func: Callable[[T], Any]) -> Dict[Any, List[T]]:
        """
        Group items by a key function, keeping insertion order within groups.

        Examples:
            by_status = flights.group_by(lambda f: f.status)
        """
        result: Dict[Any, List[T]] = {}
        for item in self._items:
            result.setdefault(key_func(item), []).append(item)
        return result

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.__class__(self._items[index])
        return self._items[index]

    def __bool__(self):
        return len(self._items) > 0

    def __repr__(self):
        return f"{self.__class__.__name__}(count={len(self._items)})"
