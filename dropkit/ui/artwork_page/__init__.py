from .cascade import CascadeController, SelectOption, UNASSIGNED_TRAIT, UNASSIGNED_VALUE, trait_value_options
from .delete_workflow import DeleteWorkflow, Idle, Confirming
from .controller import ArtworkPageController, ArtworkSnapshot, PageStatus, load_snapshot
from .artwork_card import ArtworkCard
from .artwork_page import ArtworkPage
