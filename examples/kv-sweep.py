import logging
import outrunnertools
import outrunnertools.parstudy

logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s %(message)s')

params = dict(wire_thickness=outrunnertools.awg_to_diameter(22),
              magnet_width=12,
              magnet_height=2,
              magnet_thickness=5,
              min_diameter=45,
              max_diameter=55,
              target_kv=400)

designs = outrunnertools.parstudy.kv_sweep(params, 200, 1200, 6)
for row in outrunnertools.parstudy.get_report(designs):
    print(row)

best = max(designs, key=lambda d: d.efficiency)
print('\n'.join(outrunnertools.Report().render(best)))
print(outrunnertools.export_filename(best))
