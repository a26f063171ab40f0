# -*- coding: utf-8 -*-
"""Tutorial Working Document!

Walks through the land-cover buffer workflow step by step: load a site, buffer it, crop a land-cover raster around it,
hide two categories and draw the maps.
"""

import os

from landbuffer import (
    LayerManager,
    attach_buffer_composition,
    attach_class_distribution,
    create_sample_files,
    crop_raster,
    hide_categories,
    make_buffers,
    padded_bounds,
    plot_comparison,
    plot_composition,
    plot_landcover,
    read_raster,
    read_site,
    reproject_point,
    save_figure,
    select_buffer,
)
from landbuffer.config import BUFFER_RADII, CROP_PADDING, CROP_RADIUS, HIDDEN_CODE, HIDDEN_CODES, TARGET_CRS


def run_example(site_path=None, raster_path=None, output_dir="output", export=False):
    """Run Example.

    Figures are returned in memory; with ``export=True`` they are also written to ``output_dir``.
    """
    manager = LayerManager()

    if site_path is None or raster_path is None:
        print("No input files given, creating sample data...")
        site_path, raster_path = create_sample_files(os.path.join(output_dir, "sample"))

    if not os.path.exists(raster_path):
        raise ValueError(f"Raster file not found at {raster_path}. Please provide a valid raster file.")

    print(f"Reading site location from {site_path}...")
    site = read_site(site_path)
    print(f"Site: {site.geometry.iloc[0].wkt} ({site.crs})")

    site = reproject_point(site, TARGET_CRS)
    print(f"Reprojected site: {site.geometry.iloc[0].wkt} ({site.crs})")

    print("\nBuilding buffers...")
    buffers = make_buffers(site, radii=BUFFER_RADII)
    print(f"Buffer radii: {list(buffers['radius'])}")

    print(f"\nReading raster data from {raster_path}...")
    landcover = read_raster(raster_path, layer_manager=manager, layer_name="Land_Cover")
    print(landcover)

    crop_bounds = padded_bounds(select_buffer(buffers, CROP_RADIUS), factor=CROP_PADDING)
    cropped = crop_raster(landcover, crop_bounds, layer_manager=manager, layer_name="Land_Cover_Crop")
    print(f"Cropped to {crop_bounds}: {cropped}")

    print("\nHiding categories...")
    hidden = hide_categories(
        cropped, codes=HIDDEN_CODES, hidden_code=HIDDEN_CODE, layer_manager=manager, layer_name="Land_Cover_Hidden"
    )

    fig1 = plot_landcover(cropped, buffers=buffers, site=site, title="Land cover around the site")
    fig2 = plot_landcover(hidden, buffers=buffers, site=site, hidden=[HIDDEN_CODE], title="Land cover, crops hidden")
    fig3 = plot_comparison(cropped, hidden, buffers=buffers, site=site, hidden=[HIDDEN_CODE])

    print("\nCalculating class statistics...")
    cropped.attach_function(attach_class_distribution, name="class_distribution")
    # the 5000 m buffer reaches past the crop, so composition is taken from the full raster
    landcover.attach_function(attach_buffer_composition, name="buffer_composition", buffers=buffers, rings=False)

    distribution = cropped.get_function_result("class_distribution")
    print("\nLand cover distribution in the crop:")
    for class_name, count in distribution.get("counts", {}).items():
        percentage = distribution.get("percentages", {}).get(class_name, 0)
        print(f"  {class_name}: {count} cells ({percentage:.1f}%)")

    composition = landcover.get_function_result("buffer_composition")
    fig4 = plot_composition(composition)

    if export:
        save_figure(fig1, os.path.join(output_dir, "1_landcover.png"))
        save_figure(fig2, os.path.join(output_dir, "2_landcover_hidden.png"))
        save_figure(fig3, os.path.join(output_dir, "3_landcover_maps.pdf"), width=16, height=8)
        save_figure(fig4, os.path.join(output_dir, "4_composition.png"))
        print(f"\nFigures saved to {output_dir}")

    print("\nAvailable layers:")
    for i, layer_name in enumerate(manager.get_layer_names()):
        print(f"  {i + 1}. {layer_name}")

    return {
        "manager": manager,
        "site": site,
        "buffers": buffers,
        "figures": [fig1, fig2, fig3, fig4],
    }


if __name__ == "__main__":
    run_example()

    # run_example("data/site.csv", "data/landcover_2015.tif", export=True)
