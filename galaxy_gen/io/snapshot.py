"""Still-image export of the rendered galaxy."""

import logging
from pathlib import Path
import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_SNAPSHOT_NAME = "galaxy-snapshot.png"


def save_snapshot(frame: np.ndarray, output_path: str = DEFAULT_SNAPSHOT_NAME) -> Path:
    """Write a captured frame to an image file.
    
    Args:
        frame: Image array (H, W, 3), uint8 or floats in [0, 1]
        output_path: Output file path; the format follows the suffix
        
    Returns:
        Path that was written
    """
    if frame.ndim != 3 or frame.shape[2] not in (3, 4):
        raise ValueError(f"Expected an (H, W, 3) image, got shape {frame.shape}")
    if frame.dtype != np.uint8:
        # Normalize to 0-255
        frame = (np.clip(frame, 0.0, 1.0) * 255).astype(np.uint8)
    
    try:
        import imageio
    except ImportError:
        raise ImportError(
            "Snapshot export requires imageio. Install with: pip install imageio"
        )
    
    output_path = Path(output_path)
    imageio.imwrite(output_path, frame)
    logger.info("Snapshot saved to %s", output_path)
    return output_path
