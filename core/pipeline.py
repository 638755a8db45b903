"""
pipeline - The core processing pipeline for the Vignetter project.
"""

import os
import yaml
import numpy as np
import imageio.v2 as imageio
import importlib
import time

from core.datatypes import InvalidDataError
from iop.vignette import Vignette


def load_iop_module(module_name: str):
    """
    Dynamically loads an IOP module class from the iop directory.

    It assumes the module file is named 'module_name.py' and the class
    is the CamelCase version of the module_name (e.g., 'vignette' -> 'Vignette').
    """
    class_name = "".join(word.capitalize() for word in module_name.split('_'))
    try:
        # Construct the module path (e.g., 'iop.vignette')
        module_path = f"iop.{module_name}"

        # Import the module
        imported_module = importlib.import_module(module_path)

        # Get the class from the imported module
        module_class = getattr(imported_module, class_name)
        return module_class
    except (ImportError, AttributeError) as e:
        print(f"Error: Could not load IOP module '{module_name}'.")
        print(f"Please ensure 'iop/{module_name}.py' exists and contains a class named '{class_name}'.")
        raise e


def to_float_image(data: np.ndarray) -> np.ndarray:
    """
    Converts a decoded image to float32 (H, W, C) in [0, 1].
    Grayscale input is expanded to RGB.
    """
    if data.dtype == np.uint8:
        image = data.astype(np.float32) / 255.0
    elif data.dtype == np.uint16:
        image = data.astype(np.float32) / 65535.0
    elif np.issubdtype(data.dtype, np.floating):
        image = data.astype(np.float32)
    else:
        raise InvalidDataError(f"Unsupported input data type: {data.dtype}")

    if image.ndim == 2:
        image = np.stack([image] * 3, axis=-1)
    return image


def to_uint8_image(image: np.ndarray) -> np.ndarray:
    """Clips a float image to [0, 1] and quantizes it to 8 bit."""
    return (np.clip(image, 0, 1) * 255 + 0.5).astype(np.uint8)


def process_image(image: np.ndarray, pipeline_steps):
    """
    Runs a list of {'module': name, 'params': {...}} steps over a float image.
    Exceptions from a step propagate.
    """
    for i, step in enumerate(pipeline_steps):
        module_name = step['module']
        params = step.get('params') or {}
        print(f"   - Step {i+1}/{len(pipeline_steps)}: Applying module '{module_name}' with params {params}")

        # Dynamically load the module class
        IopModule = load_iop_module(module_name)

        # Initialize the module with its parameters, then process the image
        iop_instance = IopModule(**params)
        image = iop_instance.process(image)
    return image


def render_frame(image: np.ndarray, settings=None, preset=None) -> np.ndarray:
    """Applies a single Vignette with the given settings to a float image."""
    return Vignette(preset=preset, **(settings or {})).process(image)


def run_pipeline(config_path: str):
    """
    Runs the entire image processing pipeline based on a YAML config file.

    Returns the path of the written image, or None if the run was aborted.
    """
    print("--- Starting Image Processing Pipeline ---")
    start_time = time.time()

    # Get the absolute path of the config file to resolve other paths correctly
    base_dir = os.path.dirname(os.path.abspath(config_path))

    # 1. Load Configuration
    print(f"1. Loading configuration from: {config_path}")
    with open(config_path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)

    input_path = os.path.join(base_dir, config['input_file'])
    output_dir = os.path.join(base_dir, config.get('output_dir', 'output'))
    output_path = os.path.join(output_dir, config['output_file'])
    pipeline_steps = config.get('pipeline') or []

    # 2. Decode input image
    print(f"2. Reading image: {input_path}")
    try:
        image_data = to_float_image(imageio.imread(input_path))
        print(f"   - Decoding complete. Image dimensions: {image_data.shape}")
    except Exception as e:
        print(f"Error reading image file: {e}")
        return None

    # 3. Execute Pipeline Steps
    print("3. Executing processing pipeline...")
    try:
        image_data = process_image(image_data, pipeline_steps)
    except Exception as e:
        print("   - ERROR while executing the pipeline. Aborting.")
        print(f"   - Details: {e}")
        return None

    print("   - Pipeline execution finished.")

    # 4. Save Output
    print(f"4. Saving final image to: {output_path}")
    os.makedirs(output_dir, exist_ok=True)
    imageio.imwrite(output_path, to_uint8_image(image_data))

    end_time = time.time()
    print(f"--- Pipeline Finished in {end_time - start_time:.2f} seconds ---")
    return output_path

