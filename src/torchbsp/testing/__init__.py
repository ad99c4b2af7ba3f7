"""Testing helpers for BSP trees and their geometries."""
