"""kata-heatmap: Codewars activity as a calendar heatmap."""
