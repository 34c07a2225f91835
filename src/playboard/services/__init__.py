from .codec import deserialize, document_from_dict, document_to_dict, serialize
from .commands import BoardController
from .edit_session import DragState, EditSession
from .errors import BoardError, BoardPersistenceError, MalformedDocumentError, SlotNotFoundError
from .history import HistoryManager
from .hit_testing import Hit, hit_test, label_target_at, player_at
from .layout_service import LayoutService, slot_stem
