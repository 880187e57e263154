"""
Photo extraction pipeline.

preprocess (blur, quantize) -> label blobs -> trace the boundary of every
large enough blob -> split each boundary into straight lines.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List, Optional, Tuple
import logging
import time

import cv2
import numpy as np

from .blobs.labeler import Blobs
from .blobs.models import Coord
from .blobs.pixel_grid import PixelGrid
from .config.extraction_config import ExtractionConfig
from .lines.models import LineSegment, total_length
from .lines.segmentation import find_lines
from .outline.tracer import Outline
from .preprocessing import preprocess

logger = logging.getLogger(__name__)


@dataclass
class ExtractedObject:
    """
    One blob large enough to be a photo candidate.

    Attributes:
        label: Resolved blob label
        first: First pixel of the blob in raster order
        last: Last pixel of the blob in raster order
        boundary: Ordered, cyclic boundary path
        lines: Straight segments approximating the boundary
        closed: Whether the boundary trace got back to its start
    """
    label: int
    first: Coord
    last: Coord
    boundary: List[Coord] = field(default_factory=list)
    lines: List[LineSegment] = field(default_factory=list)
    closed: bool = True

    def to_dict(self, include_boundary: bool = False) -> Dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result = {
            "label": int(self.label),
            "first": self.first.to_dict(),
            "last": self.last.to_dict(),
            "boundary_length": len(self.boundary),
            "closed": self.closed,
            "lines": [line.to_dict() for line in self.lines],
            "line_count": len(self.lines),
            "line_length": round(float(total_length(self.lines)), 3),
        }
        if include_boundary:
            result["boundary"] = [p.to_dict() for p in self.boundary]
        return result


@dataclass
class ExtractionResult:
    """
    Results of running the pipeline on one image.

    Attributes:
        objects: Photo candidates, in blob discovery order
        image_shape: Input image shape (height, width)
        blob_count: Number of blobs found before filtering
        quantized: Preprocessed image the blobs were found in
        processing_time_ms: Wall time for the run
    """
    objects: List[ExtractedObject]
    image_shape: Tuple[int, int] = field(default=(0, 0))
    blob_count: int = 0
    quantized: Optional[np.ndarray] = None
    processing_time_ms: float = 0.0

    def to_dict(self, include_boundary: bool = False) -> Dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "image_shape": {
                "height": int(self.image_shape[0]),
                "width": int(self.image_shape[1]),
            },
            "blob_count": self.blob_count,
            "object_count": len(self.objects),
            "objects": [o.to_dict(include_boundary) for o in self.objects],
            "processing_time_ms": round(self.processing_time_ms, 1),
        }

    @property
    def lines(self) -> List[LineSegment]:
        """All segments of all objects."""
        return [line for obj in self.objects for line in obj.lines]


def extract_from_blobs(
    blobs: Blobs,
    config: Optional[ExtractionConfig] = None,
) -> List[ExtractedObject]:
    """
    Trace and segment every sufficiently large blob.

    Args:
        blobs: Labeled image
        config: Extraction configuration

    Returns:
        One ExtractedObject per blob whose first/last distance exceeds
        config.min_object_distance
    """
    config = config or ExtractionConfig.default()
    max_length = config.trace_length_for(blobs.width, blobs.height)
    seg_kwargs = config.segmentation_kwargs()

    objects = []
    for label, pair in blobs.items():
        # This may be the height, width or diagonal. Skips most tiny objects.
        if pair.distance() <= config.min_object_distance:
            continue

        outline = Outline.trace(blobs, pair.first, max_length)
        if not outline.closed:
            logger.warning(f"Boundary of object {label} hit the {max_length} point cap")

        lines = find_lines(outline.points, config.max_line_error, config.strategy, **seg_kwargs)

        logger.debug(
            f"Object {label} at {tuple(pair.first)}: "
            f"{len(outline)} boundary points, {len(lines)} lines"
        )

        objects.append(ExtractedObject(
            label=label,
            first=pair.first,
            last=pair.last,
            boundary=outline.points,
            lines=lines,
            closed=outline.closed,
        ))

    return objects


def extract_objects(
    image: np.ndarray,
    config: Optional[ExtractionConfig] = None,
) -> ExtractionResult:
    """
    Run the full extraction pipeline on an image.

    Args:
        image: Grayscale or BGR image (uint8)
        config: Extraction configuration

    Returns:
        ExtractionResult with the photo candidates and their lines
    """
    start_time = time.time()
    config = config or ExtractionConfig.default()

    quantized = preprocess(image, config.blur_amount, config.quantize_levels)
    blobs = Blobs(PixelGrid(quantized))
    logger.info(f"Found {len(blobs)} blobs")

    objects = extract_from_blobs(blobs, config)
    logger.info(f"Kept {len(objects)} objects over {config.min_object_distance}px")

    return ExtractionResult(
        objects=objects,
        image_shape=tuple(image.shape[:2]),
        blob_count=len(blobs),
        quantized=quantized,
        processing_time_ms=(time.time() - start_time) * 1000,
    )


def load_image(path: str) -> np.ndarray:
    """
    Load an image with OpenCV.

    Raises:
        FileNotFoundError: If path does not exist
        ValueError: If the file can't be decoded as an image
    """
    image_path = Path(path)
    if not image_path.is_file():
        raise FileNotFoundError(f"Image not found: {image_path}")

    image = cv2.imread(str(image_path))
    if image is None:
        raise ValueError(f"Could not load image: {image_path}")

    return image


def extract_objects_from_file(
    path: str,
    config: Optional[ExtractionConfig] = None,
) -> ExtractionResult:
    """Load an image and run the pipeline on it."""
    return extract_objects(load_image(path), config)


def extract_batch(
    paths: List[str],
    config: Optional[ExtractionConfig] = None,
    workers: int = 1,
) -> Tuple[Dict[str, ExtractionResult], Dict[str, str]]:
    """
    Run the pipeline on several files. Runs share no state.

    Args:
        paths: Image paths
        config: Extraction configuration
        workers: Number of parallel workers (1 = sequential)

    Returns:
        (results, errors) keyed by path
    """
    config = config or ExtractionConfig.default()
    results: Dict[str, ExtractionResult] = {}
    errors: Dict[str, str] = {}

    if workers <= 1:
        for path in paths:
            try:
                results[path] = extract_objects_from_file(path, config)
            except (FileNotFoundError, ValueError) as e:
                logger.error(f"Error processing {path}: {e}")
                errors[path] = str(e)
        return results, errors

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(extract_objects_from_file, path, config): path
            for path in paths
        }

        for future in as_completed(futures):
            path = futures[future]
            try:
                results[path] = future.result()
            except (FileNotFoundError, ValueError) as e:
                logger.error(f"Error processing {path}: {e}")
                errors[path] = str(e)

    return results, errors
