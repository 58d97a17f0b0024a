from sphereview.scene import Material, Sphere, default_scene, upload_scene
from sphereview.vec import Vec3


def test_material_codes():
    assert [int(s.material) for s in default_scene()] == [0, 1, 2, 1, 0]
    assert Material(2) is Material.DIELECTRIC


def test_default_scene_materials_in_order():
    assert [s.material for s in default_scene()] == [
        Material.LAMBERTIAN,
        Material.METAL,
        Material.DIELECTRIC,
        Material.METAL,
        Material.LAMBERTIAN,
    ]


def test_default_scene_ground_and_glass():
    scene = default_scene()
    assert scene[-1].radius == 100.0
    assert scene[-1].center == Vec3(0.0, -100.5, -1.0)
    assert scene[2].ref_idx == 1.5
    assert all(s.ref_idx == 0.0 for s in scene if s.material != Material.DIELECTRIC)


def test_upload_scene_array_lengths():
    uniforms = {}
    scene = default_scene()
    upload_scene(uniforms, scene)
    assert uniforms["sphere_count"] == len(scene)
    assert len(uniforms["sphere_centers"]) == 3 * len(scene)
    assert len(uniforms["sphere_albedo"]) == 3 * len(scene)
    assert len(uniforms["sphere_radii"]) == len(scene)


def test_upload_scene_values_follow_spheres():
    spheres = [
        Sphere(Vec3(1.0, 2.0, 3.0), 0.5, Material.METAL, Vec3(0.1, 0.2, 0.3), fuzz=0.4),
        Sphere(Vec3(-1.0, 0.0, 4.0), 2.0, Material.DIELECTRIC, ref_idx=1.5),
    ]
    uniforms = {}
    upload_scene(uniforms, spheres)
    assert uniforms["sphere_centers"] == (1.0, 2.0, 3.0, -1.0, 0.0, 4.0)
    assert uniforms["sphere_radii"] == (0.5, 2.0)
    assert uniforms["sphere_material"] == (1, 2)
    assert uniforms["sphere_albedo"] == (0.1, 0.2, 0.3, 1.0, 1.0, 1.0)
    assert uniforms["sphere_fuzz"] == (0.4, 0.0)
    assert uniforms["sphere_ref_idx"] == (0.0, 1.5)


def test_upload_empty_scene():
    uniforms = {}
    upload_scene(uniforms, [])
    assert uniforms["sphere_count"] == 0
    assert uniforms["sphere_centers"] == ()