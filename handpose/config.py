"""
Configuration management for hand pose classification.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.default.yaml"


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int = 0
    width: int = 1280
    height: int = 720
    fps: int = 30


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int = 1
    min_detection_confidence: float = 0.6
    min_tracking_confidence: float = 0.6
    min_point_confidence: float = 0.3  # joints at or below this arrive as absent


@dataclass
class ClassifierConfig:
    """Finger classifier distances, in view pixels."""
    near_distance: float = 40.0  # thumb tucked against the other fingers
    anchor_near_distance: float = 20.0  # folded tip next to its own MCP/DIP


@dataclass
class PinchConfig:
    """Pinch debouncer settings."""
    max_distance: float = 40.0
    required_evidence: int = 3


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool = True
    show_hand_area: bool = True
    show_pinch: bool = True
    window_name: str = "Hand Pose"


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig = field(default_factory=CameraConfig)
    mediapipe: MediaPipeConfig = field(default_factory=MediaPipeConfig)
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    pinch: PinchConfig = field(default_factory=PinchConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


def default_config() -> Cfg:
    """Built-in defaults, without reading any file."""
    return Cfg()


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses the config.default.yaml
              shipped inside the package

    Returns:
        Configuration object with all settings
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    logger.info("Loaded config from %s", config_path)
    return _dict_to_config(data)


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object."""
    camera_data = data['camera']
    camera = CameraConfig(
        index=camera_data['index'],
        width=camera_data['width'],
        height=camera_data['height'],
        fps=camera_data['fps']
    )

    mp_data = data['mediapipe']
    mediapipe = MediaPipeConfig(
        max_num_hands=mp_data['max_num_hands'],
        min_detection_confidence=mp_data['min_detection_confidence'],
        min_tracking_confidence=mp_data['min_tracking_confidence'],
        min_point_confidence=mp_data['min_point_confidence']
    )

    classifier_data = data['classifier']
    classifier = ClassifierConfig(
        near_distance=float(classifier_data['near_distance']),
        anchor_near_distance=float(classifier_data['anchor_near_distance'])
    )

    pinch_data = data['pinch']
    pinch = PinchConfig(
        max_distance=float(pinch_data['max_distance']),
        required_evidence=int(pinch_data['required_evidence'])
    )

    display_data = data['display']
    display = DisplayConfig(
        show_landmarks=display_data['show_landmarks'],
        show_hand_area=display_data['show_hand_area'],
        show_pinch=display_data['show_pinch'],
        window_name=display_data['window_name']
    )

    return Cfg(
        camera=camera,
        mediapipe=mediapipe,
        classifier=classifier,
        pinch=pinch,
        display=display
    )
