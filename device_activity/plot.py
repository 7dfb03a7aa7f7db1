"""Hourly activity charts"""

import logging

import matplotlib.pyplot as plt
import seaborn as sns

from .config import FIGURE_DPI, FIGURE_SIZE, HOURS_PER_DAY, Y_AXIS_STEP
from .errors import UnwritableOutputError
from .stats import activity_table

log = logging.getLogger(__name__)


def y_axis_limit(max_count):
    """Round the highest count up to the next multiple of 10"""
    limit = ((int(max_count) + Y_AXIS_STEP - 1) // Y_AXIS_STEP) * Y_AXIS_STEP
    return max(limit, Y_AXIS_STEP)


def save_graph(ax, fig, image_name, title, y_max):
    """Save plot to disc"""
    ax.set_title(title)
    ax.set_ylabel("Activity")
    ax.set_xlabel("Hour of day")
    ax.set_xlim(0, HOURS_PER_DAY - 1)
    ax.set_ylim(0, y_max)
    ax.set_xticks(range(HOURS_PER_DAY))
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc="upper left")
    ax.grid(axis="y")

    fig.tight_layout()
    try:
        fig.savefig(image_name)
    except OSError as e:
        raise UnwritableOutputError(f"Impossible to write the graph {image_name}: {e}") from e
    finally:
        plt.close(fig)


def plot_device_activity(activity, output_file, title):
    """
    Plot the hourly activity of every label of a comparative dataset

    Args:
        activity: mapping label (device or day) -> hours of activity
        output_file: path of the PNG to write
        title: chart title
    """
    table = activity_table(activity)
    palette = sns.color_palette("husl", max(len(table.index), 1))

    fig, ax = plt.subplots(figsize=FIGURE_SIZE, dpi=FIGURE_DPI)

    for color, (label, counts) in zip(palette, table.iterrows()):
        ax.plot(table.columns, counts.values, linestyle="-", color=color, label=label)

    max_count = table.to_numpy().max() if table.size else 0
    save_graph(ax, fig, output_file, title, y_axis_limit(max_count))
    log.info("Generated graph: %s", output_file)


def plot_device_activity_median(hourly_medians, output_file, title, device):
    """Plot the median daily profile of one device"""
    color = sns.color_palette("husl", 1)[0]

    fig, ax = plt.subplots(figsize=FIGURE_SIZE, dpi=FIGURE_DPI)
    ax.plot(range(HOURS_PER_DAY), list(hourly_medians), linestyle="-", color=color, label=device)

    save_graph(ax, fig, output_file, title, y_axis_limit(max(hourly_medians, default=0)))
    log.info("Generated median graph: %s", output_file)
