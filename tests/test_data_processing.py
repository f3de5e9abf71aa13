import dataclasses

import numpy as np
import pandas as pd
import pytest

from generic_dbscan.clustering import Clusterable, DBSCANSequential
from generic_dbscan.data_processing import (
    EuclideanPoint,
    GeoPoint,
    load_points_csv,
    points_from_array,
)


class TestEuclideanPoint:
    def test_distance(self):
        a = EuclideanPoint.of(0, 0)
        b = EuclideanPoint.of(3, 4)

        assert a.distance(b) == pytest.approx(5.0)
        assert b.distance(a) == pytest.approx(5.0)
        assert a.distance(a) == 0.0

    def test_label_not_part_of_equality(self):
        a = EuclideanPoint.of(1, 2, label='x')
        b = EuclideanPoint.of(1, 2, label='y')

        assert a == b
        assert hash(a) == hash(b)

    def test_coords_normalised_to_float_tuple(self):
        p = EuclideanPoint([1, 2])
        assert p.coords == (1.0, 2.0)
        np.testing.assert_array_equal(p.to_array(), [1.0, 2.0])

    def test_immutable(self):
        p = EuclideanPoint.of(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.coords = (0.0,)

    def test_dimension_mismatch(self):
        with pytest.raises(ValueError):
            EuclideanPoint.of(0, 0).distance(EuclideanPoint.of(0, 0, 0))

    def test_distance_to_other_point_type(self):
        with pytest.raises(TypeError):
            EuclideanPoint.of(0, 0).distance(GeoPoint(0.0, 0.0))

    def test_empty_coords(self):
        with pytest.raises(ValueError):
            EuclideanPoint(())

    def test_is_clusterable(self):
        assert isinstance(EuclideanPoint.of(0), Clusterable)


class TestGeoPoint:
    def test_one_degree_of_latitude(self):
        a = GeoPoint(0.0, 0.0)
        b = GeoPoint(1.0, 0.0)

        assert a.distance(b) == pytest.approx(111195.0, rel=1e-4)
        assert a.distance(b) == pytest.approx(b.distance(a))
        assert a.distance(a) == pytest.approx(0.0, abs=1e-9)

    def test_distance_to_other_point_type(self):
        with pytest.raises(TypeError):
            GeoPoint(0.0, 0.0).distance(EuclideanPoint.of(0, 0))

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            GeoPoint(91.0, 0.0)
        with pytest.raises(ValueError):
            GeoPoint(0.0, 181.0)

    def test_clusters_by_metres(self):
        # 约每 0.001 度纬度 111 米
        points = [GeoPoint(39.9 + 0.001 * i, 116.4) for i in range(4)]
        points.append(GeoPoint(40.5, 116.4))

        clusters = DBSCANSequential(eps=150.0, min_pts=2).cluster(points)

        assert len(clusters) == 1
        assert set(clusters[0]) == set(points[:4])


class TestPointsFromArray:
    def test_euclidean_rows(self):
        points = points_from_array(np.array([[0, 0], [1, 2]]))
        assert points == [EuclideanPoint.of(0, 0), EuclideanPoint.of(1, 2)]

    def test_one_dimensional_array(self):
        points = points_from_array(np.array([1.0, 2.0]))
        assert points == [EuclideanPoint.of(1.0), EuclideanPoint.of(2.0)]

    def test_geo_rows(self):
        points = points_from_array(np.array([[39.9, 116.4]]), point_type='geo')
        assert points == [GeoPoint(39.9, 116.4)]

    def test_geo_requires_two_columns(self):
        with pytest.raises(ValueError):
            points_from_array(np.zeros((3, 3)), point_type='geo')

    def test_unknown_point_type(self):
        with pytest.raises(ValueError):
            points_from_array(np.zeros((3, 2)), point_type='manhattan')

    def test_nan_rows_dropped_with_warning(self):
        with pytest.warns(UserWarning):
            points = points_from_array(np.array([[0, 0], [np.nan, 1], [2, 2]]))
        assert len(points) == 2

    def test_empty(self):
        assert points_from_array(np.array([])) == []
        assert points_from_array(np.array([]), point_type='geo') == []

    def test_labels(self):
        points = points_from_array(np.array([[0, 0], [1, 1]]), labels=['a', 'b'])
        assert [p.label for p in points] == ['a', 'b']


class TestLoadPointsCsv:
    @pytest.fixture
    def csv_path(self, tmp_path):
        path = tmp_path / "points.csv"
        pd.DataFrame({
            'name': ['p0', 'p1', 'p2'],
            'x': [0.0, 0.0, 1.0],
            'y': [0.0, 1.0, 0.0],
        }).to_csv(path, index=False)
        return path

    def test_numeric_columns_by_default(self, csv_path):
        points = load_points_csv(csv_path)
        assert points == [EuclideanPoint.of(0, 0), EuclideanPoint.of(0, 1), EuclideanPoint.of(1, 0)]

    def test_selected_columns_and_labels(self, csv_path):
        points = load_points_csv(csv_path, columns=['y'], label_column='name')

        assert [p.coords for p in points] == [(0.0,), (1.0,), (0.0,)]
        assert [p.label for p in points] == ['p0', 'p1', 'p2']

    def test_unknown_column(self, csv_path):
        with pytest.raises(ValueError):
            load_points_csv(csv_path, columns=['z'])

    def test_unknown_label_column(self, csv_path):
        with pytest.raises(ValueError):
            load_points_csv(csv_path, label_column='id')

    def test_geo_points(self, tmp_path):
        path = tmp_path / 'geo.csv'
        pd.DataFrame({'lat': [39.9, 39.901], 'lon': [116.4, 116.4]}).to_csv(path, index=False)

        points = load_points_csv(path, columns=['lat', 'lon'], point_type='geo')

        assert all(isinstance(p, GeoPoint) for p in points)
        assert [p.latitude for p in points] == pytest.approx([39.9, 39.901])
        assert [p.longitude for p in points] == pytest.approx([116.4, 116.4])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_points_csv(tmp_path / "missing.csv")
