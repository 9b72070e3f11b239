"""
Repository Base - Implementação base de repositórios com Django ORM.

Fornece o CRUD comum às entidades com id inteiro:
- create: insere e devolve a entidade com id atribuído
- get_by_id / list_all
- update: UPDATE ... WHERE id = ?, True se afetou linhas
- delete: True se removeu

Princípios:
- Repositórios são stateless
- Não contêm lógica de negócio
- Apenas persistência e queries
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
import logging

from django.db import models
from django.db.models import QuerySet

logger = logging.getLogger(__name__)

# Type variables
T = TypeVar("T")  # Entity type
M = TypeVar("M", bound=models.Model)  # Model type


class BaseRepository(ABC, Generic[T, M]):
    """
    Classe base abstrata para repositórios Django.

    Type Parameters:
        T: Tipo da entidade de domínio
        M: Tipo do Model Django

    Example:
        class DjangoClientRepository(BaseRepository[Client, ClientModel]):
            model_class = ClientModel

            def to_entity(self, model):
                return ClientMapper.to_entity(model)

            def to_fields(self, entity):
                return ClientMapper.to_fields(entity)
    """

    # Classe do model Django (definir na subclasse)
    model_class: Type[M]

    default_order_field: str = "id"

    @abstractmethod
    def to_entity(self, model: M) -> T:
        """Converte Model Django para Entity de domínio."""
        raise NotImplementedError

    @abstractmethod
    def to_fields(self, entity: T) -> Dict[str, Any]:
        """Converte Entity para os campos gravados (sem id)."""
        raise NotImplementedError

    def _get_base_queryset(self) -> QuerySet[M]:
        return self.model_class.objects.all()

    def create(self, entity: T) -> T:
        model = self.model_class.objects.create(**self.to_fields(entity))
        logger.info(f"{self.model_class.__name__} saved: {model.pk}")
        return self.to_entity(model)

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """
        Busca entidade por ID.

        Returns:
            Entidade encontrada ou None
        """
        try:
            return self.to_entity(self._get_base_queryset().get(pk=entity_id))
        except self.model_class.DoesNotExist:
            return None

    def list_all(self) -> List[T]:
        """
        Lista todas as entidades.

        Warning:
            Use com cuidado em produção - sem paginação!
        """
        qs = self._get_base_queryset().order_by(self.default_order_field)
        return [self.to_entity(m) for m in qs]

    def update(self, entity: T) -> bool:
        """
        Atualiza entidade existente.

        Returns:
            True se ao menos uma linha foi afetada
        """
        entity_id = getattr(entity, "id")
        if entity_id is None:
            return False

        updated = self.model_class.objects.filter(pk=entity_id).update(**self.to_fields(entity))
        if updated:
            logger.info(f"{self.model_class.__name__} updated: {entity_id}")
        return updated > 0

    def delete(self, entity_id: int) -> bool:
        """
        Remove entidade.

        Returns:
            True se removido, False se não existia
        """
        deleted_count, _ = self.model_class.objects.filter(pk=entity_id).delete()
        if deleted_count:
            logger.info(f"{self.model_class.__name__} deleted: {entity_id}")
        return deleted_count > 0
