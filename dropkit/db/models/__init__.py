from .mixins import Base, new_id
from .project import Project, Collection
from .trait import Trait, TraitValue
from .image_layer import ImageLayer
