from .project_repo import ProjectRepo, CollectionRepo
from .trait_repo import TraitRepo, TraitValueRepo
from .image_layer_repo import ImageLayerRepo
