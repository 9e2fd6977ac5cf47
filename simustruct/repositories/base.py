from logging import getLogger
from typing import Dict, Generic, List, Type, TypeVar

logger = getLogger("repo")

Entity = TypeVar("Entity")


class NamedRepository(Generic[Entity]):
    label: str = "entity"
    already_exists: Type[Exception] = Exception
    does_not_exist: Type[Exception] = Exception

    def __init__(self):
        self._entities: Dict[str, Entity] = {}

    def __len__(self) -> int:
        return len(self._entities)

    def get_key(self, entity: Entity) -> str:
        raise NotImplementedError

    def create(self, entity: Entity) -> Entity:
        key = self.get_key(entity)

        if key in self._entities:
            logger.error(f"{self.label} already exist : {key}")

            raise self.already_exists(f"{self.label.capitalize()} {key} already exists")

        self._entities[key] = entity

        logger.info(f"created {self.label} {key}")

        return entity

    def get(self, name: str) -> Entity:
        try:
            return self._entities[name]
        except KeyError:
            raise self.does_not_exist(f"{self.label.capitalize()} {name} does not exist")

    def exists(self, name: str) -> bool:
        return name in self._entities

    def list(self) -> List[Entity]:
        return list(self._entities.values())
